"""Tests for emmet.yaml configuration."""

import pytest

from emmet_parser import ConfigError, EmmetConfig, emmet_to_html
from emmet_parser.config import SELF_CLOSING_TAGS, find_config_file


def test_defaults():
    config = EmmetConfig()
    assert config.default_tag == "div"
    assert config.self_closing_tags == SELF_CLOSING_TAGS
    assert config.max_multiplier is None


def test_load_missing_file_returns_defaults(tmp_path):
    config = EmmetConfig.load(tmp_path / "emmet.yaml")
    assert config == EmmetConfig()


def test_load_empty_file_returns_defaults(tmp_path):
    path = tmp_path / "emmet.yaml"
    path.write_text("")
    assert EmmetConfig.load(path) == EmmetConfig()


def test_load_values(tmp_path):
    path = tmp_path / "emmet.yaml"
    path.write_text(
        "default_tag: span\n"
        "self_closing_tags: [img, source]\n"
        "max_multiplier: 50\n"
    )
    config = EmmetConfig.load(path)
    assert config.default_tag == "span"
    assert config.self_closing_tags == ["img", "source"]
    assert config.max_multiplier == 50


def test_config_changes_expansion(tmp_path):
    path = tmp_path / "emmet.yaml"
    path.write_text("default_tag: section\nself_closing_tags: [source]\n")
    config = EmmetConfig.load(path)
    assert emmet_to_html(".a>source+img", config) == (
        '<section class="a"><source /><img></img></section>'
    )


@pytest.mark.parametrize(
    "content",
    [
        "max_multiplier: -1\n",
        "default_tag: ''\n",
        "unknown_key: 1\n",
        "- a list\n",
        "default_tag: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path, content):
    path = tmp_path / "emmet.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        EmmetConfig.load(path)


def test_find_config_file_walks_parents(tmp_path):
    (tmp_path / "emmet.yaml").write_text("default_tag: p\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == tmp_path / "emmet.yaml"


def test_find_config_file_prefers_nearest(tmp_path):
    (tmp_path / "emmet.yaml").write_text("")
    nested = tmp_path / "a"
    nested.mkdir()
    (nested / "emmet.yaml").write_text("")
    assert find_config_file(nested) == nested / "emmet.yaml"
