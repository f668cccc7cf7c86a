"""Tests for YAML config loader gateway."""

from __future__ import annotations

from pathlib import Path

import pytest

from personal_assistant.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader, deep_merge
from personal_assistant.l4_frameworks_and_drivers.infra_config import build_app_config


class TestYamlConfigLoader:
    def test_load_raw_reads_file(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml))
        assert raw['assistant']['model'] == 'gpt-4'
        assert raw['history']['limit'] == 10

    def test_merged_with_defaults(self, sample_config_yaml: Path):
        cfg = build_app_config(YamlConfigLoader().load_raw(str(sample_config_yaml)))
        assert cfg.assistant.model == 'gpt-4'
        assert cfg.assistant.max_tokens == 800
        assert cfg.server.port == 8080
        assert cfg.server.host == '127.0.0.1'

    def test_overrides_win(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml), overrides={'server': {'port': 9999}})
        assert raw['server']['port'] == 9999

    def test_missing_explicit_path_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            YamlConfigLoader().load_raw(str(tmp_path / 'nonexistent.yaml'))

    def test_non_mapping_raises(self, tmp_path: Path):
        p = tmp_path / 'list.yaml'
        p.write_text('- a\n- b\n', encoding='utf-8')
        with pytest.raises(ValueError, match='mapping'):
            YamlConfigLoader().load_raw(str(p))

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        p = tmp_path / 'empty.yaml'
        p.write_text('', encoding='utf-8')
        raw = YamlConfigLoader().load_raw(str(p))
        assert raw == {}
        assert build_app_config(raw).history.limit == 30

    def test_partial_file_with_provider_section(self, tmp_path: Path):
        p = tmp_path / 'partial.yaml'
        p.write_text(
            'assistant:\n  model: llama3\n  models: []\nopenai:\n  base_url: http://localhost:11434/v1\n',
            encoding='utf-8',
        )
        cfg = build_app_config(YamlConfigLoader().load_raw(str(p)))
        assert cfg.assistant.model == 'llama3'
        assert cfg.assistant.temperature == 0.7
        assert cfg.server.port == 3001

    def test_first_existing_default_path_used(self, tmp_path: Path):
        second = tmp_path / 'config.yml'
        second.write_text('history:\n  limit: 3\n', encoding='utf-8')
        loader = YamlConfigLoader(default_paths=[tmp_path / 'config.yaml', second])
        assert loader.load_raw()['history']['limit'] == 3

    def test_no_default_file_gives_empty(self, tmp_path: Path):
        loader = YamlConfigLoader(default_paths=[tmp_path / 'missing.yaml'])
        assert loader.load_raw() == {}

    def test_preserves_provider_section(self, tmp_path: Path):
        p = tmp_path / 'with_infra.yaml'
        p.write_text('openai:\n  base_url: http://localhost:8000/v1\n', encoding='utf-8')
        assert YamlConfigLoader().load_raw(str(p))['openai']['base_url'] == 'http://localhost:8000/v1'


class TestDeepMerge:
    def test_nested(self):
        base = {'a': {'b': 1, 'c': 2}, 'd': 3}
        deep_merge(base, {'a': {'b': 10}, 'e': 5})
        assert base == {'a': {'b': 10, 'c': 2}, 'd': 3, 'e': 5}

    def test_non_dict_replaces(self):
        base = {'a': {'b': 1}}
        deep_merge(base, {'a': ['x']})
        assert base == {'a': ['x']}
