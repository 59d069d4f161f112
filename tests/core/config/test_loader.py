# tests/core/config/test_loader.py
"""
Testes do loader de arquivos YAML (load_file e auxiliares).

Os testes asseguram que:
- separadores de documento, comentários e linhas vazias são descartados
- o restante do arquivo é interpretado como um único documento
- um documento vazio equivale a um mapa vazio
- raízes que não são mapas são rejeitadas
- falhas de abertura geram `ConfigReadError` com o caminho e o motivo
- erros de sintaxe YAML não são encapsulados

Limites explícitos:
    - Não valida integração com a store (ver tests/core/store)
"""

from pathlib import Path

import pytest
import yaml

try:
    from config_yaml.core.config.loader import (
        filter_document_lines,
        load_file,
        parse_document,
        read_document_text,
    )
    from config_yaml.core.config.errors import (
        ConfigError,
        ConfigReadError,
        InvalidConfigRootTypeError,
    )
except Exception as e:  # noqa: BLE001
    filter_document_lines = None
    load_file = None
    parse_document = None
    read_document_text = None
    ConfigError = None
    ConfigReadError = None
    InvalidConfigRootTypeError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader e suas exceções tipadas estejam disponíveis para os testes.

    Falha imediatamente, com mensagem explícita, quando o módulo `loader`
    ou as exceções canônicas de `errors` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/config_yaml/core/config/loader.py (load_file, parse_document)\n"
            "- src/config_yaml/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_filter_drops_separators_comments_and_empty_lines():
    """
    Verifica a política de descarte de linhas do loader.

    Decisões arquiteturais:
        - Três ou mais hífens no início da linha marcam separador
        - Comentários só são descartados quando começam na coluna zero
        - Linhas mantidas preservam o terminador de linha

    Invariantes:
        - Comentários inline e indentados chegam intactos ao parser YAML
    """
    _require_imports()
    lines = [
        "---\n",
        "----- section\n",
        "# header comment\n",
        "\n",
        "a: 1  # inline\n",
        "b:\n",
        "  # indented comment\n",
        "  c: 2\n",
    ]
    out = filter_document_lines(lines)
    assert out == "a: 1  # inline\nb:\n  # indented comment\n  c: 2\n"


def test_filter_keeps_two_hyphen_lines():
    _require_imports()
    assert filter_document_lines(["--\n", "x: 1\n"]) == "--\nx: 1\n"


def test_load_annotated_file(annotated_config: Path):
    """
    Verifica que um arquivo com cabeçalho, comentários e linhas em branco
    é carregado como um único mapa.
    """
    _require_imports()
    out = load_file(annotated_config)
    assert out == {
        "title": "Sunflowers",
        "render": {"width": 800, "height": 600},
        "tags": ["oil", "canvas"],
    }


def test_multiple_documents_collapse_into_one(tmp_path: Path):
    """
    Verifica que separadores entre documentos são ignorados.

    Como a store não tem noção de múltiplos destinos, todas as seções
    do arquivo passam a compor um único mapa.
    """
    _require_imports()
    path = tmp_path / "multi.yaml"
    path.write_text("---\na: 1\n---\nb: 2\n...\n", encoding="utf-8")
    assert load_file(path) == {"a": 1, "b": 2}


def test_empty_document_is_empty_mapping(tmp_path: Path):
    _require_imports()
    path = tmp_path / "empty.yaml"
    path.write_text("---\n# nothing here\n\n", encoding="utf-8")
    assert load_file(path) == {}


def test_read_document_text_accepts_str_path(seed_config: Path):
    _require_imports()
    assert read_document_text(str(seed_config)) == "clobber: 1\nmedia: [mp3, ogg, wav]\n"


def test_missing_file_raises_read_error(tmp_path: Path):
    """
    Verifica que a ausência do arquivo de entrada é tratada como erro fatal tipado.

    Invariantes:
        - A exceção é `ConfigReadError` (subclasse de `ConfigError`)
        - O caminho e o texto do erro do sistema aparecem na mensagem
        - O `OSError` original fica encadeado em `__cause__`
    """
    _require_imports()
    missing = tmp_path / "nope.yaml"
    with pytest.raises(ConfigReadError) as excinfo:
        load_file(missing)

    err = excinfo.value
    assert isinstance(err, ConfigError)
    assert err.path == str(missing)
    assert str(missing) in str(err)
    assert err.reason in str(err)
    assert isinstance(err.__cause__, FileNotFoundError)
    assert err.to_dict()["type"] == "CONFIG_READ_FAILED"


def test_directory_path_raises_read_error(tmp_path: Path):
    _require_imports()
    with pytest.raises(ConfigReadError):
        load_file(tmp_path)


@pytest.mark.parametrize("text, received", [("- a\n- b\n", "list"), ("just text\n", "str"), ("42\n", "int")])
def test_non_mapping_root_rejected(text: str, received: str):
    _require_imports()
    with pytest.raises(InvalidConfigRootTypeError) as excinfo:
        parse_document(text, source="inline.yaml")
    assert excinfo.value.received_type == received
    assert excinfo.value.payload.details["source"] == "inline.yaml"


def test_malformed_yaml_propagates_parser_error(tmp_path: Path):
    """
    Verifica que erros de sintaxe YAML chegam ao chamador sem encapsulamento.
    """
    _require_imports()
    path = tmp_path / "broken.yaml"
    path.write_text("a: [1, 2\nb: }\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_file(path)
