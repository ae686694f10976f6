"""
Configuration tests.

Options load from YAML and/or environment variables, the environment wins,
and missing or malformed values fail loudly.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from podstore.config import ConfigError, load_options
from podstore.identifiers.single_root import SingleRootIdentifierStrategy

FULL_ENV = {
    "PODSTORE_S3_ENDPOINT": "minio.example.local",
    "PODSTORE_S3_PORT": "9000",
    "PODSTORE_S3_USE_SSL": "true",
    "PODSTORE_S3_ACCESS_KEY": "access",
    "PODSTORE_S3_SECRET_KEY": "secret",
    "PODSTORE_S3_BUCKET": "pod-data",
    "PODSTORE_BASE_URL": "/",
}


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "storage.yaml"
    path.write_text(
        "storage:\n"
        "  end_point: minio.local\n"
        "  port: 9000\n"
        "  use_ssl: false\n"
        "  access_key: minioadmin\n"
        "  secret_key: minioadmin\n"
        "  bucket: pods\n"
        "  base_url: /pods/\n"
    )
    return path


def test_load_from_env():
    options = load_options(env=FULL_ENV)

    assert options.end_point == "minio.example.local"
    assert options.port == 9000
    assert options.use_ssl is True
    assert options.access_key == "access"
    assert options.secret_key == "secret"
    assert options.bucket == "pod-data"
    assert isinstance(options.identifier_strategy, SingleRootIdentifierStrategy)
    assert options.endpoint_url == "https://minio.example.local:9000"


def test_load_from_yaml(config_file):
    options = load_options(str(config_file), env={})

    assert options.end_point == "minio.local"
    assert options.use_ssl is False
    assert options.bucket == "pods"
    assert options.identifier_strategy.base_url == "/pods/"
    assert options.endpoint_url == "http://minio.local:9000"


def test_env_overrides_yaml(config_file):
    options = load_options(str(config_file), env={"PODSTORE_S3_BUCKET": "override", "PODSTORE_S3_PORT": " "})

    assert options.bucket == "override"
    assert options.port == 9000


def test_reads_os_environ_by_default(monkeypatch):
    for key, value in FULL_ENV.items():
        monkeypatch.setenv(key, value)

    assert load_options().bucket == "pod-data"


def test_missing_options_are_named():
    env = {"PODSTORE_S3_ENDPOINT": "minio", "PODSTORE_S3_ACCESS_KEY": "access"}

    with pytest.raises(ConfigError, match="port") as exc:
        load_options(env=env)
    assert "bucket" in str(exc.value)
    assert "end_point" not in str(exc.value)


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_bad_port(port):
    with pytest.raises(ConfigError, match="port"):
        load_options(env={**FULL_ENV, "PODSTORE_S3_PORT": port})


def test_bad_bool():
    with pytest.raises(ConfigError, match="use_ssl"):
        load_options(env={**FULL_ENV, "PODSTORE_S3_USE_SSL": "maybe"})


def test_storage_section_must_be_mapping(tmp_path):
    path = tmp_path / "storage.yaml"
    path.write_text("storage: just-a-string\n")

    with pytest.raises(ConfigError, match="mapping"):
        load_options(str(path), env={})
