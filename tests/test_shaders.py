import pytest

from quadkit.shaders import PreprocessorConfig, ShaderPreprocessError, preprocess_shader


def test_preprocessor_expands_include():
    shader_string = """
#version blah blah

asd
asd

#include "hello.glsl"

qwe
"""
    preprocessed = """
#version blah blah

asd
asd

iii
jjj

qwe
"""
    result = preprocess_shader(
        shader_string,
        PreprocessorConfig(includes=[("hello.glsl", "iii\njjj")]),
    )
    assert result == preprocessed


def test_source_without_includes_is_unchanged():
    source = "void main() {\n    gl_FragColor = vec4(1.0);\n}\n"
    assert preprocess_shader(source, PreprocessorConfig()) == source


def test_missing_include_raises():
    with pytest.raises(ShaderPreprocessError, match="missing.glsl"):
        preprocess_shader('#include "missing.glsl"\n', PreprocessorConfig())


def test_directive_without_quote_raises():
    config = PreprocessorConfig(includes=[("a", "x")])
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader("#include a\n", config)


def test_directive_at_end_of_source_raises():
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader("void main();\n#include", PreprocessorConfig())


def test_unterminated_file_name_raises():
    config = PreprocessorConfig(includes=[("a", "x")])
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader('#include "a\n', config)


def test_several_spaces_before_name_are_skipped():
    config = PreprocessorConfig(includes=[("a.glsl", "BODY")])
    assert preprocess_shader('pre\n#include    "a.glsl"\npost', config) == "pre\nBODY\npost"


def test_every_directive_is_expanded():
    config = PreprocessorConfig(includes=[("a", "A"), ("b", "B")])
    source = '#include "a"\n#include "b"\n#include "a"\n'
    assert preprocess_shader(source, config) == "A\nB\nA\n"


def test_first_matching_include_wins():
    config = PreprocessorConfig(includes=[("a", "first"), ("a", "second")])
    assert preprocess_shader('#include "a"', config) == "first"


def test_included_text_is_not_rescanned():
    config = PreprocessorConfig(includes=[("a", '#include "b"')])
    assert preprocess_shader('#include "a"', config) == '#include "b"'