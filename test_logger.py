import json
import logging

from mailpayload import config, logger


def _record(msg, **extra):
    record = logging.LogRecord('mailpayload', logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    output = json.loads(logger.JSONFormatter().format(_record('hello')))
    assert output['level'] == 'info'
    assert output['msg'] == 'hello'
    assert output['service'] == config.SERVICE_NAME
    assert output['time'].endswith('Z')


def test_json_formatter_context():
    record = _record('built', extra_data={'attachments': 2})
    output = json.loads(logger.JSONFormatter().format(record))
    assert output['attachments'] == 2


def test_number_from_env(monkeypatch):
    monkeypatch.setenv('MAILPAYLOAD_TEST_NUMBER', '42')
    assert config._number_from_env('MAILPAYLOAD_TEST_NUMBER', 1) == 42
    monkeypatch.setenv('MAILPAYLOAD_TEST_NUMBER', 'forty-two')
    assert config._number_from_env('MAILPAYLOAD_TEST_NUMBER', 1) == 1
    assert config._number_from_env('MAILPAYLOAD_TEST_MISSING', 7) == 7
