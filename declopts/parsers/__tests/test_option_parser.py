#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest
from declopts._interface import ValueType_e
from declopts.errors import InvalidValue, ParseError, UnknownOption
from declopts.parsers.converters import ConverterRegistry
from declopts.parsers.parser import OptionParser, parse, parse_argv
from declopts.parsers.result import ParseResult
from declopts.schema import Schema

@pytest.fixture
def schema():
    return (Schema()
            .add(int, "-f", "-first")
            .add(float, "-s", "-second"))

@pytest.fixture
def full_schema():
    return (Schema()
            .add(int, "-f", "-first")
            .add(float, "-s", "-second")
            .add(str, "-n", "-name")
            .add(bool, "-v", "-verbose"))

class TestOptionParser:

    def test_sanity(self, schema):
        parser = OptionParser(schema)
        assert(parser.schema is schema)

    def test_example(self, schema):
        result = parse(schema, ["-first=2", "-s=3.14"])
        assert(isinstance(result, ParseResult))
        assert(result.ok)
        assert(result.get("-f") == 2)
        assert(result.get("-s") == 3.14)

    def test_only_supplied_options(self, full_schema):
        result = parse(full_schema, ["-v", "-name=bob"])
        assert(set(result) == {"-verbose", "-name"})
        assert(result.to_dict() == {"-verbose": True, "-name": "bob"})

    def test_empty(self, full_schema):
        result = parse(full_schema, [])
        assert(result.ok)
        assert(len(result) == 0)

    def test_flag(self, full_schema):
        result = parse(full_schema, ["-v"])
        assert(result["-verbose"] is True)

    @pytest.mark.parametrize("token", ["-v=false", "-verbose=0", "-v="])
    def test_flag_ignores_value(self, full_schema, token):
        result = parse(full_schema, [token])
        assert(result["-v"] is True)

    def test_text(self, full_schema):
        result = parse(full_schema, ["-n=a=b"])
        assert(result["-name"] == "a=b")

    def test_text_empty(self, full_schema):
        result = parse(full_schema, ["-n="])
        assert(result["-name"] == "")

    def test_text_without_value(self, full_schema):
        result = parse(full_schema, ["-name"])
        assert("-name" not in result)
        match result.errors:
            case [InvalidValue() as err]:
                assert(err.name == "-name")
            case x:
                assert(False), x

    def test_canonical_keys(self, schema):
        result = parse(schema, ["-f=2", "-second=1.5"])
        assert(list(result) == ["-first", "-second"])

    def test_alias_consistency(self, schema):
        result = parse(schema, ["-f=2"])
        assert(result["-f"] == result["-first"] == 2)

    def test_last_write_wins(self, schema):
        result = parse(schema, ["-f=1", "-first=2"])
        assert(result.ok)
        assert(result["-f"] == 2)

    def test_last_write_wins_long_then_short(self, schema):
        result = parse(schema, ["-first=1", "-f=3"])
        assert(result["-first"] == 3)

    def test_invalid_value_keeps_prior(self, schema):
        result = parse(schema, ["-f=1", "-first=abc"])
        assert(result["-f"] == 1)
        assert(len(result.errors) == 1)

    def test_unknown_option(self, schema):
        result = parse(schema, ["-z=1", "-f=2"])
        assert(not result.ok)
        assert(result.to_dict() == {"-first": 2})
        match result.errors:
            case [UnknownOption() as err]:
                assert(err.token == "-z=1")
                assert(err.name == "-z")
                assert(str(err) == "command line option -z=1 not recognized")
            case x:
                assert(False), x

    @pytest.mark.parametrize("token", ["-F=1", "-fir=1", "first=1", "--first=1", "-f-first=1"])
    def test_exact_matching_only(self, schema, token):
        result = parse(schema, [token])
        assert(len(result) == 0)
        assert(isinstance(result.errors[0], UnknownOption))

    def test_invalid_value(self, schema):
        result = parse(schema, ["-first=abc"])
        assert("-first" not in result)
        match result.errors:
            case [InvalidValue() as err]:
                assert(err.token == "-first=abc")
                assert(str(err) == "command line option -first=abc provided invalid value")
            case x:
                assert(False), x

    def test_numeric_without_value(self, schema):
        result = parse(schema, ["-first", "-s"])
        assert(len(result) == 0)
        assert(all(isinstance(x, InvalidValue) for x in result.errors))
        assert(len(result.errors) == 2)

    def test_errors_keep_order(self, schema):
        result = parse(schema, ["-z", "-f=x", "-y"])
        assert([type(x) for x in result.errors] == [UnknownOption, InvalidValue, UnknownOption])

    def test_diagnostics_logged(self, schema, caplog):
        with caplog.at_level(logmod.WARNING):
            parse(schema, ["-z=1", "-first=abc"])

        assert("command line option -z=1 not recognized" in caplog.text)
        assert("command line option -first=abc provided invalid value" in caplog.text)

    def test_strict_unknown(self, schema):
        with pytest.raises(UnknownOption):
            parse(schema, ["-f=2", "-z=1"], strict=True)

    def test_strict_invalid(self, schema):
        with pytest.raises(InvalidValue):
            parse(schema, ["-first=abc"], strict=True)

    def test_strict_success(self, schema):
        result = parse(schema, ["-first=2"], strict=True)
        assert(result["-f"] == 2)

    def test_idempotent(self, full_schema):
        tokens = ["-f=2", "-z", "-n=blah", "-s=bad", "-v"]
        first  = parse(full_schema, tokens)
        second = parse(full_schema, tokens)
        assert(first == second)
        assert(first is not second)

    def test_different_results_unequal(self, schema):
        assert(parse(schema, ["-f=2"]) != parse(schema, ["-f=3"]))
        assert(parse(schema, ["-f=2"]) != parse(schema, ["-f=2", "-z"]))

    def test_tokens_are_verbatim(self, full_schema):
        result = parse(full_schema, ["-n=a b  c"])
        assert(result["-n"] == "a b  c")

    def test_reuse_parser(self, schema):
        parser = OptionParser(schema)
        assert(parser.parse(["-f=1"])["-f"] == 1)
        assert(parser.parse(["-f=2"])["-f"] == 2)

    def test_parse_token(self, schema):
        spec, val = OptionParser(schema).parse_token("-s=2.5")
        assert(spec.canonical == "-second")
        assert(val.tag is ValueType_e.FLOAT)
        assert(val.value == 2.5)

    def test_parse_token_unknown(self, schema):
        with pytest.raises(UnknownOption):
            OptionParser(schema).parse_token("-z=2")

    def test_parse_against_empty_schema(self):
        result = parse(Schema(), ["-f=2"])
        assert(len(result) == 0)
        assert(isinstance(result.errors[0], UnknownOption))

    def test_schema_parse_method(self, schema):
        assert(schema.parse(["-f=2"]) == parse(schema, ["-f=2"]))

    def test_earlier_schema_unaffected(self, schema):
        extended = schema.add(bool, "-v", "-verbose")
        result   = schema.parse(["-v"])
        assert(isinstance(result.errors[0], UnknownOption))
        assert(extended.parse(["-v"])["-v"] is True)

class TestParseArgv:

    def test_skips_program_name(self, schema):
        result = parse_argv(schema, ["prog", "-first=2", "-s=3.14"])
        assert(result.to_dict() == {"-first": 2, "-second": 3.14})

    def test_program_name_only(self, schema):
        result = parse_argv(schema, ["prog"])
        assert(result.ok)
        assert(len(result) == 0)

    def test_empty_argv(self, schema):
        result = parse_argv(schema, [])
        assert(len(result) == 0)

    def test_program_name_not_parsed(self, schema):
        result = parse_argv(schema, ["-f=2"])
        assert(len(result) == 0)
        assert(result.ok)

    def test_strict(self, schema):
        with pytest.raises(ParseError):
            parse_argv(schema, ["prog", "-z"], strict=True)

    @pytest.mark.parametrize("argv", ["prog -f=2", b"prog", iter(["prog", "-f=2"])])
    def test_rejects_non_sequence(self, schema, argv):
        with pytest.raises(TypeError):
            parse_argv(schema, argv)

class TestParserConverterFailures:

    @pytest.mark.parametrize("token", ["-s=1e999", "-second=-1e999"])
    def test_float_overflow_is_invalid(self, schema, token):
        result = schema.parse([token])
        assert("-second" not in result)
        assert(isinstance(result.errors[0], InvalidValue))

    def test_misbehaving_converter_continues(self):
        registry = ConverterRegistry({ValueType_e.INTEGER: lambda x: x})
        schema   = Schema(registry=registry).add(int, "-f", "-first")
        result   = schema.parse(["-f=2", "-z"])
        assert(len(result) == 0)
        assert(len(result.errors) == 2)
        assert(isinstance(result.errors[0], InvalidValue))
        assert(isinstance(result.errors[1], UnknownOption))

    def test_misbehaving_converter_strict(self):
        registry = ConverterRegistry({ValueType_e.INTEGER: lambda x: x})
        schema   = Schema(registry=registry).add(int, "-f", "-first")
        with pytest.raises(InvalidValue):
            schema.parse(["-f=2", "-z"], strict=True)
