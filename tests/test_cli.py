# tests/test_cli.py
import cli


def test_update_form_prefills_blank_for_null_fields(monkeypatch):
    prefilled = {}

    def fake_prompt(message, completer=None, default=""):
        prefilled[message] = default
        return default

    monkeypatch.setattr(cli, "prompt_with_autocomplete", fake_prompt)
    monkeypatch.setattr(cli, "ask_price", lambda message, default=10.0: default)
    monkeypatch.setattr(cli, "ask_in_stock", lambda: None)

    fields = cli.ask_product_fields({"id": "9", "name": "Mug", "price": 4, "category": None, "description": None})
    assert "None" not in prefilled.values()
    assert prefilled["Description"] == ""
    assert fields["category"] is None
    assert fields["description"] is None
    assert fields["name"] == "Mug"
