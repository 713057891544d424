import pytest

from mailpayload import (
    Attachment,
    ContentType,
    InvalidFilename,
    MailSetting,
    MailSettings,
    SpamChecker,
    ThresholdOutOfRange,
    build_request_fragment,
)


def test_mail_settings_merges_settings():
    settings = MailSettings(SpamChecker(True, 5))
    assert settings.dictionary_value == {"spam_check": {"enable": True, "threshold": 5}}
    assert len(settings) == 1


def test_mail_settings_replaces_same_key():
    settings = MailSettings(SpamChecker(True, 5)).add(SpamChecker(False, 8))
    assert len(settings) == 1
    assert settings.get("spam_check") == SpamChecker(False, 8)


def test_mail_settings_rejects_non_settings():
    with pytest.raises(TypeError):
        MailSettings().add({"spam_check": {}})


def test_mail_settings_validation():
    assert MailSettings(SpamChecker(True, 10)).validation_error() is None
    with pytest.raises(ThresholdOutOfRange):
        MailSettings(SpamChecker(True, 0)).validate()


def test_mail_settings_accepts_custom_setting():
    class SandboxMode(MailSetting):
        key = "sandbox_mode"

        def __init__(self, enable):
            self.enable = enable

    settings = MailSettings(SpamChecker(True, 2), SandboxMode(True))
    assert settings.dictionary_value == {
        "spam_check": {"enable": True, "threshold": 2},
        "sandbox_mode": {"enable": True},
    }


def test_build_fragment_with_everything():
    attachment = Attachment("notes.txt", b"hello", type=ContentType.PLAIN_TEXT)
    fragment = build_request_fragment(
        attachments=[attachment],
        mail_settings=MailSettings(SpamChecker(True, 7, "https://example.com/hook"))
    )
    assert fragment == {
        "attachments": [{
            "disposition": "attachment",
            "content": "aGVsbG8=",
            "filename": "notes.txt",
            "type": "text/plain",
        }],
        "mail_settings": {
            "spam_check": {
                "enable": True,
                "threshold": 7,
                "post_to_url": "https://example.com/hook",
            }
        },
    }


def test_build_fragment_omits_empty_sections():
    assert build_request_fragment() == {}
    assert build_request_fragment(mail_settings=MailSettings()) == {}
    fragment = build_request_fragment(attachments=[Attachment("a.bin", b"\x01")])
    assert list(fragment) == ["attachments"]


def test_build_fragment_raises_first_failure():
    with pytest.raises(InvalidFilename):
        build_request_fragment(
            attachments=[Attachment("ok.txt", b""), Attachment("bad,name.txt", b"")],
            mail_settings=MailSettings(SpamChecker(True, 99))
        )

    with pytest.raises(ThresholdOutOfRange):
        build_request_fragment(
            attachments=[Attachment("ok.txt", b"")],
            mail_settings=MailSettings(SpamChecker(True, 99))
        )
