"""Tests for configuration loading."""

from pathlib import Path

import pytest

from street_easy.client import DEFAULT_ENDPOINT
from street_easy.config import get_client_config, get_search_defaults, load_config


def test_load_config(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("client:\n  endpoint: https://custom.endpoint/graphql\n  timeout: 10\n")
    cfg = load_config(path)
    client_cfg = get_client_config(cfg)
    assert client_cfg.endpoint == "https://custom.endpoint/graphql"
    assert client_cfg.timeout == 10.0


def test_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_missing_default_path(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("street_easy.config.DEFAULT_CONFIG_PATH", tmp_path / "config.yaml")
    assert load_config() == {}


def test_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_non_mapping_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_client_config_defaults() -> None:
    client_cfg = get_client_config({})
    assert client_cfg.endpoint is None
    assert client_cfg.resolved_endpoint == DEFAULT_ENDPOINT
    assert client_cfg.timeout == 30.0


def test_search_defaults() -> None:
    defaults = get_search_defaults({
        "search": {
            "areas": ["manhattan", 300],
            "per_page": 5,
            "sort_attribute": "price",
            "sort_direction": "ascending",
            "max_price": 4000,
        }
    })
    assert defaults == {
        "areas": [100, 300],
        "per_page": 5,
        "sort_attribute": "PRICE",
        "sort_direction": "ASCENDING",
        "max_price": 4000.0,
    }


def test_search_defaults_when_section_missing() -> None:
    defaults = get_search_defaults({})
    assert defaults["areas"] == [1]
    assert defaults["max_price"] is None


def test_bad_sort_rejected() -> None:
    with pytest.raises(ValueError):
        get_search_defaults({"search": {"sort_attribute": "CHEAPEST"}})


def test_repo_config_loads() -> None:
    cfg = load_config(Path(__file__).parent.parent / "config.yaml")
    assert get_client_config(cfg).resolved_endpoint == DEFAULT_ENDPOINT
    assert get_search_defaults(cfg)["areas"] == [1]


def test_blank_timeout_in_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("client:\n  endpoint:\n  timeout:\n")
    client_cfg = get_client_config(load_config(path))
    assert client_cfg.timeout == 30.0
    assert client_cfg.resolved_endpoint == DEFAULT_ENDPOINT
