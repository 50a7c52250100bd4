import pathlib

import pytest

from sensefreq.config import AnalysisConfig, config_from_mapping, load_config


def test_defaults() -> None:
    cfg = AnalysisConfig()
    assert cfg.top_k == 3
    assert cfg.min_samples == 4
    assert cfg.frequency_mapping == "conventional"
    assert cfg.parallel_axes is False
    assert cfg.recording_duration_s == 10.0


def test_mapping_accepts_nested_analysis_block_and_ignores_unknown_keys() -> None:
    cfg = config_from_mapping(
        {"analysis": {"top_k": 5, "frequency_mapping": "LEGACY"}, "colour": "blue"}
    )
    assert cfg.top_k == 5
    assert cfg.frequency_mapping == "legacy"


def test_sanitized_clamps_values() -> None:
    cfg = AnalysisConfig(
        top_k=0, min_samples=-3, frequency_mapping="weird", recording_duration_s=-1
    ).sanitized()
    assert cfg.top_k == 1
    assert cfg.min_samples == 2
    assert cfg.frequency_mapping == "conventional"
    assert cfg.recording_duration_s == 10.0


def test_load_config_from_yaml(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "analysis.yaml"
    path.write_text("analysis:\n  top_k: 4\n  parallel_axes: true\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.top_k == 4
    assert cfg.parallel_axes is True


def test_load_config_missing_file_gives_defaults(tmp_path: pathlib.Path) -> None:
    assert load_config(tmp_path / "nope.yaml") == AnalysisConfig()
    assert load_config(None) == AnalysisConfig()


def test_load_config_rejects_non_mapping(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "block, key",
    [
        ({"top_k": None}, "top_k"),
        ({"top_k": "three"}, "top_k"),
        ({"top_k": True}, "top_k"),
        ({"min_samples": 2.5}, "min_samples"),
        ({"parallel_axes": "yes please"}, "parallel_axes"),
        ({"frequency_mapping": "log"}, "frequency_mapping"),
        ({"recording_duration_s": [10]}, "recording_duration_s"),
    ],
)
def test_wrongly_typed_values_name_the_key(block, key) -> None:
    with pytest.raises(ValueError, match=f"analysis.{key}"):
        config_from_mapping({"analysis": block})


def test_analysis_block_must_be_a_mapping() -> None:
    with pytest.raises(ValueError):
        config_from_mapping({"analysis": [1, 2]})
    assert config_from_mapping({"analysis": None}) == AnalysisConfig()


def test_flat_document_is_read_as_analysis_block() -> None:
    assert config_from_mapping({"top_k": 7, "unrelated": 1}).top_k == 7


def test_sanitized_rejects_none_instead_of_type_error() -> None:
    with pytest.raises(ValueError, match="top_k"):
        AnalysisConfig(top_k=None).sanitized()


def test_load_config_null_value_is_value_error(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "analysis.yaml"
    path.write_text("analysis:\n  top_k: null\n", encoding="utf-8")
    with pytest.raises(ValueError, match="top_k"):
        load_config(path)


def test_load_config_invalid_yaml(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("analysis: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)
