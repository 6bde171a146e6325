"""
Tests for the string path parser.
"""
import pytest

from pathget.core.paths import MAX_MEMOIZE_SIZE, _parse, string_to_path


@pytest.mark.parametrize("path, expected", [
    ("a", ["a"]),
    ("a.b.c", ["a", "b", "c"]),
    ("a[0].b.c", ["a", "0", "b", "c"]),
    ("a[0][1]", ["a", "0", "1"]),
    ("[0].a", ["0", "a"]),
    ("a[ 1 ]", ["a", "1"]),
    ('a["b.c"].d', ["a", "b.c", "d"]),
    ("a['b[0]']", ["a", "b[0]"]),
    ("a['it\\'s']", ["a", "it's"]),
    ('a["back\\\\slash"]', ["a", "back\\slash"]),
    (".a", ["", "a"]),
    ("a..b", ["a", "", "b"]),
    ("a.", ["a", ""]),
    ("a[]", ["a", ""]),
    ("", []),
])
def test_string_to_path(path, expected):
    """Each path string splits into the expected keys.
test_results_are_memoized|Repeated parses are served from the cache.
test_cache_is_bounded|The cache never grows past its cap.
test_rejects_non_strings|Only strings can be parsed.
test_get_tag|Each kind of value maps to its "[object X]" tag.
test_awaitables_are_promises|Coroutines and other awaitables are tagged as promises.
test_instance_attribute_does_not_override_tag|Only the class can override the tag.
test_is_symbol|Enum members and Symbol-tagged classes are symbols.
test_get_value|get prints the resolved value as JSON.
test_get_subtree|Containers are printed whole.
test_get_exact_dotted_key|A verbatim dotted key wins over the deep path.
test_get_missing_uses_default|--default is parsed as YAML and printed when the path misses.
test_get_missing_without_default_prints_null|With no default, a miss prints null.
test_get_tag|--tag prints the type tag instead of the value.
test_has|has prints true/false and exits 1 on a miss.
test_parse|parse prints the key list.
test_yaml_document|YAML documents are queried like JSON ones.
test_invalid_document|An unparseable document is a clean CLI error.
test_config_default|The config file default is used when the path misses.
test_config_command|config prints the effective configuration.
test_bad_config|Unknown config options are reported.
test_defaults|With no config file every option has its default.
test_load_config|YAML values are coerced into the model.
test_empty_config_file|An empty file is an empty config.
test_config_must_be_mapping|A YAML list is not a config.
test_missing_config_file|A missing file raises DocumentLoadError.
test_bad_boolean|Booleans that cannot be coerced fail validation.
test_as_bool|Bool-like strings and numbers are coerced.
test_as_bool_rejects|Anything else is rejected.
test_parse_scalar|CLI values are read as YAML scalars, falling back to the raw text.
test_parse_document|JSON is strict for .json files; YAML handles the rest.
test_load_document_unknown_suffix|Unknown extensions are parsed as YAML.
test_load_document_missing|A missing document raises DocumentLoadError.
"""
    assert string_to_path(path) == expected


def test_returns_fresh_list():
    """Mutating a result must not leak into later calls through the cache."""
    first = string_to_path("a.b")
    first.append("c")
    assert string_to_path("a.b") == ["a", "b"]


def test_results_are_memoized():
    """Repeated parses are served from the cache."""
    string_to_path("x.y")
    string_to_path("x.y")
    info = _parse.cache_info()
    assert info.hits == 1
    assert info.maxsize == MAX_MEMOIZE_SIZE


def test_cache_is_bounded():
    """The cache never grows past its cap."""
    for i in range(MAX_MEMOIZE_SIZE + 10):
        string_to_path(f"k{i}.v")
    assert _parse.cache_info().currsize <= MAX_MEMOIZE_SIZE


def test_rejects_non_strings():
    """Only strings can be parsed."""
    with pytest.raises(TypeError):
        string_to_path(["a", "b"])
