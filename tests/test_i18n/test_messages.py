"""Unit tests for the localization table (tsinit.i18n.messages).

Tests cover:
- Every language has a non-empty string for every message id
- Messages defaults, set_language, get, format
- Independent Messages instances do not share the active language
"""

from __future__ import annotations

import pytest

from tsinit.i18n import LANGUAGE_LABELS, MESSAGES, Language, MessageId, Messages, missing_messages


class TestTable:
    @pytest.mark.unit
    def test_table_is_total(self):
        assert missing_messages() == []

    @pytest.mark.unit
    @pytest.mark.parametrize("language", list(Language))
    @pytest.mark.parametrize("message_id", list(MessageId))
    def test_get_returns_non_empty_string(self, language: Language, message_id: MessageId):
        text = Messages(language).get(message_id)
        assert isinstance(text, str)
        assert text.strip()

    @pytest.mark.unit
    def test_exactly_two_languages(self):
        assert {lang.value for lang in Language} == {"en", "pt"}
        assert set(MESSAGES) == set(Language)

    @pytest.mark.unit
    def test_every_language_has_a_label(self):
        assert set(LANGUAGE_LABELS) == set(Language)

    @pytest.mark.unit
    def test_missing_messages_reports_gaps(self, monkeypatch: pytest.MonkeyPatch):
        broken = {lang: dict(table) for lang, table in MESSAGES.items()}
        del broken[Language.PT][MessageId.AUTHOR]
        broken[Language.EN][MessageId.LICENSE] = ""
        monkeypatch.setattr("tsinit.i18n.messages.MESSAGES", broken)

        assert set(missing_messages()) == {
            (Language.PT, MessageId.AUTHOR),
            (Language.EN, MessageId.LICENSE),
        }


class TestMessages:
    @pytest.mark.unit
    def test_defaults_to_english(self):
        assert Messages().language is Language.EN
        assert Messages().get(MessageId.OPERATION_CANCELED) == "Operation canceled by the user."

    @pytest.mark.unit
    def test_set_language_switches_lookup(self):
        messages = Messages()
        messages.set_language("pt")
        assert messages.language is Language.PT
        assert messages.get(MessageId.OPERATION_CANCELED) == "Operação cancelada pelo usuário."

    @pytest.mark.unit
    def test_get_accepts_raw_key(self):
        assert Messages().get("projectReady") == "Project is ready to go! 🚀🚀🚀"

    @pytest.mark.unit
    def test_unknown_language_rejected(self):
        with pytest.raises(ValueError):
            Messages().set_language("fr")

    @pytest.mark.unit
    def test_unknown_message_id_rejected(self):
        with pytest.raises(ValueError):
            Messages().get("doesNotExist")

    @pytest.mark.unit
    def test_format_appends_detail(self):
        messages = Messages()
        assert (
            messages.format(MessageId.SETTING_REMOTE, "git@github.com:acme/app.git")
            == "Setting new remote origin to git@github.com:acme/app.git"
        )

    @pytest.mark.unit
    def test_instances_are_independent(self):
        first = Messages()
        second = Messages()
        first.set_language(Language.PT)
        assert second.language is Language.EN
