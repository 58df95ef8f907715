import json
from pathlib import Path

from dpip_lib.config import DEFAULT_TIMEOUT, IPC_FILE, get_ipc_file, get_timeout, load_dpip_config


def test_ipc_file_precedence(tmp_path, monkeypatch):

    config = tmp_path / 'dpip.json'
    monkeypatch.delenv('DPVS_IPC_FILE', raising=False)

    # Nothing configured: the built-in default.

    assert get_ipc_file(config_path=config) == IPC_FILE

    config.write_text(json.dumps({'ipc_file': '/run/from-config.ipc'}))
    assert get_ipc_file(config_path=config) == Path('/run/from-config.ipc')

    monkeypatch.setenv('DPVS_IPC_FILE', '/run/from-env.ipc')
    assert get_ipc_file(config_path=config) == Path('/run/from-env.ipc')

    assert get_ipc_file('/run/from-arg.ipc', config_path=config) == Path('/run/from-arg.ipc')


def test_timeout_precedence(tmp_path, monkeypatch):

    config = tmp_path / 'dpip.json'
    monkeypatch.delenv('DPIP_TIMEOUT', raising=False)

    assert get_timeout(config_path=config) == DEFAULT_TIMEOUT

    config.write_text(json.dumps({'timeout': 5}))
    assert get_timeout(config_path=config) == 5.0

    monkeypatch.setenv('DPIP_TIMEOUT', '2.5')
    assert get_timeout(config_path=config) == 2.5

    # An unusable environment value falls through to the config file.

    monkeypatch.setenv('DPIP_TIMEOUT', 'soon')
    assert get_timeout(config_path=config) == 5.0

    assert get_timeout(1.0, config_path=config) == 1.0


def test_bad_config_file(tmp_path):

    config = tmp_path / 'dpip.json'

    config.write_text('{not json')
    assert load_dpip_config(config) == {}

    config.write_text('[1, 2, 3]')
    assert load_dpip_config(config) == {}

    assert load_dpip_config(tmp_path / 'missing.json') == {}
