import json

import pytest
import yaml

from inputgraph.cli import app
from inputgraph.cli.config import ProjectConfig, load_config
from inputgraph.core.defs import InputKind
from inputgraph.core.errors import ConfigError
from inputgraph.core.options import DEFAULT_RAW_FOREIGN_KEY_INPUTS, GeneratorOptions

from .conftest import BLOG_SCHEMA, USER_SCHEMA


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Temporary project directory holding the user schema."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "schema.yaml").write_text(yaml.dump(USER_SCHEMA))
    return tmp_path


def test_init_writes_default_config(project, capsys):
    assert app(["init"]) == 0

    config = load_config(project / "inputgraph.yaml")
    assert config.schema == "schema.yaml"
    assert config.output == "generated"
    assert config.generator == GeneratorOptions()
    assert "Created" in capsys.readouterr().out


def test_init_refuses_to_overwrite(project):
    app(["init"])

    assert app(["init"]) == 1
    assert app(["init", "--force"]) == 0


def test_generate_writes_inputs_and_enums(project, capsys):
    assert app(["generate", "--out", "out"]) == 0

    out = project / "out"
    assert (out / "Role.enum.ts").exists()
    assert (out / "SortOrder.enum.ts").exists()
    where = (out / "UserWhereInput.input.ts").read_text()
    assert "import { StringFilter } from './StringFilter.input';" in where
    assert "  id?: StringFilter | string;" in where
    assert (out / "NestedEnumRoleFilter.input.ts").exists()
    assert "Generated" in capsys.readouterr().out


def test_generate_uses_config_options(project):
    config = ProjectConfig(
        output="ts",
        workers=2,
        generator=GeneratorOptions(file_naming="kebab", optional_null_union=False),
    )
    config.save(project / "inputgraph.yaml")

    assert app(["generate"]) == 0

    create = (project / "ts" / "user-create-input.input.ts").read_text()
    assert "countComments?: number;" in create
    assert "from './string-filter.input'" in (project / "ts" / "user-where-input.input.ts").read_text()


def test_generate_missing_schema(project, capsys):
    assert app(["generate", "--schema", "nope.yaml"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_inspect_prints_record_json(project, capsys):
    assert app(["inspect", "UserWhereInput"]) == 0

    record = json.loads(capsys.readouterr().out)
    assert record["name"] == "UserWhereInput"
    assert record["kind"] == "where"
    age = next(p for p in record["properties"] if p["name"] == "age")
    assert age["type"] == "IntFilter | number"
    assert age["annotation"] == "() => IntFilter"


def test_inspect_unknown_input(project, capsys):
    assert app(["inspect", "Nothing"]) == 1
    assert "no input named 'Nothing'" in capsys.readouterr().out


def test_inspect_other_schema(project, capsys):
    (project / "blog.yaml").write_text(yaml.dump(BLOG_SCHEMA))

    assert app(["inspect", "PostCreateInput", "--schema", "blog.yaml"]) == 0
    names = [p["name"] for p in json.loads(capsys.readouterr().out)["properties"]]
    assert names == ["id", "author"]


def test_options_from_dict():
    options = GeneratorOptions.from_dict({
        "raw_foreign_key_inputs": ["where", "update"],
        "file_naming": "kebab",
        "emit_docs": True,
    })

    assert options.raw_foreign_key_inputs == frozenset({InputKind.WHERE, InputKind.UPDATE})
    assert options.file_naming == "kebab"
    assert options.optional_null_union
    assert options.extra == {"emit_docs": True}


def test_options_defaults():
    options = GeneratorOptions.from_dict(None)

    assert options.raw_foreign_key_inputs == DEFAULT_RAW_FOREIGN_KEY_INPUTS
    assert options.decorator == "InputType"


@pytest.mark.parametrize("data", [
    {"file_naming": "snake"},
    {"raw_foreign_key_inputs": ["sometimes"]},
    {"optional_null_union": "false"},
    {"optional_null_union": 0},
])
def test_invalid_options(data):
    with pytest.raises(ConfigError):
        GeneratorOptions.from_dict(data)


def test_config_round_trip(tmp_path):
    config = ProjectConfig(workers=3, generator=GeneratorOptions.from_dict({"emit_docs": True}))
    config.save(tmp_path / "inputgraph.yaml")

    loaded = load_config(tmp_path / "inputgraph.yaml")
    assert loaded.workers == 3
    assert loaded.generator.extra == {"emit_docs": True}


def test_invalid_workers():
    with pytest.raises(ConfigError):
        ProjectConfig.from_dict({"workers": 0})


def test_missing_config_is_none(tmp_path):
    assert load_config(tmp_path / "inputgraph.yaml") is None


def test_quoted_boolean_option_in_config_file(tmp_path):
    (tmp_path / "inputgraph.yaml").write_text("generator:\n  optional_null_union: 'false'\n")

    with pytest.raises(ConfigError):
        load_config(tmp_path / "inputgraph.yaml")
