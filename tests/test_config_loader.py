"""Tests for the YAML decoder (infra/config_loader.py).

Coverage:
* Empty documents, comments, unknown keys and nested sections.
* Type coercion per option kind and the mismatch errors.
* Malformed YAML and non-mapping documents.
* File read errors.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from llauncher.core.arguments import build_args
from llauncher.core.record import ConfigRecord
from llauncher.exceptions import ConfigParseError, ConfigReadError
from llauncher.infra.config_loader import load_config, parse_config


# ---------------------------------------------------------------------------
# Document shape
# ---------------------------------------------------------------------------

class TestDocumentShape:
    def test_empty_document_is_all_zero(self) -> None:
        assert parse_config("") == ConfigRecord()

    def test_comment_only_document_is_all_zero(self) -> None:
        assert parse_config("# nothing here\n") == ConfigRecord()

    def test_comments_are_ignored(self) -> None:
        record = parse_config(
            "# This is a comment\n"
            "model: /path/to/model.gguf  # inline comment\n"
            "# Another comment\n"
            "host: 0.0.0.0\n"
        )
        assert record.get("model_path") == "/path/to/model.gguf"
        assert record.get("host") == "0.0.0.0"

    def test_unknown_and_nested_keys_are_ignored(self) -> None:
        record = parse_config(
            "model: /path/to/model.gguf\n"
            "advanced:\n"
            "  option1: value1\n"
            "lora:\n"
            "  - adapter1.bin\n"
            "  - adapter2.bin\n"
        )
        assert record.get("model_path") == "/path/to/model.gguf"
        assert record.get("lora_adapters") == ("adapter1.bin", "adapter2.bin")

    def test_null_value_means_unset(self) -> None:
        record = parse_config("model:\nport: ~\n")
        assert record == ConfigRecord()

    def test_keys_map_to_semantic_names(self) -> None:
        record = parse_config("n-ctx: 4096\nsampler-seq: kTp\nn-predict: 128\n")
        assert record.get("context_size") == 4096
        assert record.get("sampler_seq") == "kTp"
        assert record.get("predict") == 128

    @pytest.mark.parametrize("text", ["- a\n- b\n", "just a string\n", "42\n"])
    def test_non_mapping_rejected(self, text: str) -> None:
        with pytest.raises(ConfigParseError, match="mapping"):
            parse_config(text)

    def test_malformed_yaml_rejected(self) -> None:
        with pytest.raises(ConfigParseError, match="Invalid YAML") as exc_info:
            parse_config("model: [unclosed\n", source="bad.yaml")
        assert "bad.yaml" in str(exc_info.value)
        assert exc_info.value.hint is not None

    def test_special_characters_preserved(self) -> None:
        record = parse_config(
            'model: "/path/with \\"quotes\\"/model.gguf"\n'
            'host: "server-name:with:colons"\n'
            'path: "/path/with/special/chars/!@#$%^&*()"\n'
        )
        assert record.get("model_path") == '/path/with "quotes"/model.gguf'
        assert record.get("host") == "server-name:with:colons"
        assert record.get("path") == "/path/with/special/chars/!@#$%^&*()"


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------

class TestCoercion:
    def test_yaml_booleans(self) -> None:
        record = parse_config(
            "verbose: true\nmlock: yes\nno-mmap: false\nmetrics: no\n"
        )
        assert record.get("verbose") is True
        assert record.get("mlock") is True
        assert record.get("no_mmap") is False
        assert record.get("metrics") is False

    def test_floats(self) -> None:
        record = parse_config("temp: 0.8\ntop-p: 0.9\nrope-scale: 1.5\n")
        assert record.get("temperature") == 0.8
        assert record.get("top_p") == 0.9
        assert record.get("rope_scale") == 1.5

    def test_integer_accepted_for_float(self) -> None:
        record = parse_config("rope-freq-base: 10000\n")
        assert record.get("rope_freq_base") == 10000.0
        assert isinstance(record.get("rope_freq_base"), float)

    def test_number_accepted_for_string(self) -> None:
        record = parse_config("tensor-split: 3\ncpu-mask: 0.5\n")
        assert record.get("tensor_split") == "3"
        assert record.get("cpu_mask") == "0.5"

    def test_list_items_coerced_to_strings(self) -> None:
        record = parse_config("lora:\n  - 1\n  - b.bin\n")
        assert record.get("lora_adapters") == ("1", "b.bin")

    @pytest.mark.parametrize(
        ("text", "name", "expected"),
        [
            ("cpu-mask: 0xFF\n", "cpu_mask", "0xFF"),
            ("api-key: 0123\n", "api_key", "0123"),
            ("tensor-split: 3.10\n", "tensor_split", "3.10"),
            ("tensor-split: 1e3\n", "tensor_split", "1e3"),
            ("reverse-prompt: yes\n", "reverse_prompt", "yes"),
            ("reverse-prompt: on\n", "reverse_prompt", "on"),
            ("host: true\n", "host", "true"),
            ("api-key: '0123'\n", "api_key", "0123"),
        ],
    )
    def test_string_options_keep_source_text(
        self, text: str, name: str, expected: str,
    ) -> None:
        record = parse_config(text)
        assert record.get(name) == expected

    def test_list_items_keep_source_text(self) -> None:
        record = parse_config("lora:\n  - 0x10\n  - yes\n  - 2.50\n")
        assert record.get("lora_adapters") == ("0x10", "yes", "2.50")

    def test_source_text_reaches_the_command_line(self) -> None:
        record = parse_config("cpu-mask: 0xFF\napi-key: 0123\n")
        args = build_args(record)
        assert args[args.index("--cpu-mask") + 1] == "0xFF"
        assert args[args.index("--api-key") + 1] == "0123"

    def test_typed_options_still_resolve(self) -> None:
        record = parse_config("threads: 0x10\nmlock: on\ntemp: 1.50\n")
        assert record.get("threads") == 16
        assert record.get("mlock") is True
        assert record.get("temperature") == 1.5

    def test_merge_keys_are_flattened(self) -> None:
        record = parse_config(
            "base: &base\n"
            "  cpu-mask: 0xFF\n"
            "  port: 8080\n"
            "<<: *base\n"
            "host: localhost\n"
        )
        assert record.get("cpu_mask") == "0xFF"
        assert record.get("port") == 8080
        assert record.get("host") == "localhost"

    def test_last_duplicate_key_wins(self) -> None:
        record = parse_config("cpu-mask: 0x1\ncpu-mask: 0x2\n")
        assert record.get("cpu_mask") == "0x2"

    @pytest.mark.parametrize(
        ("text", "key"),
        [
            ('threads: "four"\n', "threads"),
            ("threads: 1.5\n", "threads"),
            ("threads: true\n", "threads"),
            ("mlock: 1\n", "mlock"),
            ('mlock: "true"\n', "mlock"),
            ("temp: hot\n", "temp"),
            ("temp: true\n", "temp"),
            ("host: [a, b]\n", "host"),
            ("lora: adapter.bin\n", "lora"),
            ("lora:\n  - {a: 1}\n", "lora"),
        ],
    )
    def test_type_mismatch_names_the_key(self, text: str, key: str) -> None:
        with pytest.raises(ConfigParseError) as exc_info:
            parse_config(text)
        assert f"'{key}'" in str(exc_info.value)


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_loads_file(self, write_config: Callable[[str], Path]) -> None:
        path = write_config("model: /m.gguf\nport: 8080\n")
        record = load_config(path)
        assert record.get("model_path") == "/m.gguf"
        assert record.get("port") == 8080

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.yaml"
        with pytest.raises(ConfigReadError, match="nope.yaml") as exc_info:
            load_config(missing)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.hint is not None
        assert "LLAMA_CONFIG_PATH" in exc_info.value.hint

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigReadError):
            load_config(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"model: \xff\xfe\n")
        with pytest.raises(ConfigReadError, match="UTF-8"):
            load_config(path)

    def test_parse_error_names_the_file(self, write_config: Callable[[str], Path]) -> None:
        path = write_config('threads: "four"\n')
        with pytest.raises(ConfigParseError, match=path.name):
            load_config(path)
