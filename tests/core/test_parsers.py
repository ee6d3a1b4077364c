"""
Unit tests for confloader.parsers package.
"""
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from textwrap import dedent

# Add src to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from confloader.exceptions import ParseError
from confloader.parsers import (
    IniParser,
    JsonParser,
    PythonParser,
    XmlParser,
    YamlParser,
)
from confloader.parsers.ini_parser import expand_dotted_keys


class ParserTestCase(unittest.TestCase):
    """Base class creating a temporary directory."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        """Clean up test fixtures."""
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)

    def write(self, name: str, content: str) -> Path:
        path = self.temp_dir / name
        path.write_text(dedent(content), encoding="utf-8")
        return path


class TestSupportedExtensions(unittest.TestCase):
    """Test the extensions each parser claims."""

    def test_extensions(self):
        """Test that every parser claims its own extensions."""
        self.assertEqual(PythonParser().get_supported_extensions(), ["py"])
        self.assertEqual(IniParser().get_supported_extensions(), ["ini"])
        self.assertEqual(XmlParser().get_supported_extensions(), ["xml"])
        self.assertEqual(JsonParser().get_supported_extensions(), ["json"])
        self.assertEqual(YamlParser().get_supported_extensions(), ["yaml", "yml"])

    def test_supports(self):
        """Test the supports helper."""
        self.assertTrue(YamlParser().supports("yml"))
        self.assertFalse(YamlParser().supports("json"))


class TestPythonParser(ParserTestCase):
    """Test PythonParser."""

    def test_mapping(self):
        """Test a module-level dict."""
        path = self.write("app.py", 'config = {"a": {"b": 1}}\n')

        self.assertEqual(PythonParser().parse(path), {"a": {"b": 1}})

    def test_callable(self):
        """Test a module-level function returning a dict."""
        path = self.write("app.py", """
            def config():
                return {"debug": True}
        """)

        self.assertEqual(PythonParser().parse(path), {"debug": True})

    def test_missing_config_name(self):
        """Test that a file without 'config' is rejected."""
        path = self.write("app.py", "settings = {}\n")

        with self.assertRaises(ParseError):
            PythonParser().parse(path)

    def test_non_mapping(self):
        """Test that a non-mapping value is rejected."""
        path = self.write("app.py", "config = [1, 2]\n")

        with self.assertRaises(ParseError):
            PythonParser().parse(path)

    def test_raising_module(self):
        """Test that errors while executing the file become ParseError."""
        path = self.write("app.py", "raise RuntimeError('boom')\n")

        with self.assertRaises(ParseError) as ctx:
            PythonParser().parse(path)

        self.assertIn("boom", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_syntax_error(self):
        """Test that invalid Python becomes ParseError."""
        path = self.write("app.py", "config = {\n")

        with self.assertRaises(ParseError):
            PythonParser().parse(path)


class TestIniParser(ParserTestCase):
    """Test IniParser."""

    def test_sections_become_dicts(self):
        """Test that sections are nested and values stay strings."""
        path = self.write("app.ini", """
            [database]
            host = localhost
            port = 5432
        """)

        self.assertEqual(
            IniParser().parse(path),
            {"database": {"host": "localhost", "port": "5432"}},
        )

    def test_keys_before_first_section(self):
        """Test that keys outside sections stay at the top level."""
        path = self.write("app.ini", """
            name = demo
            [server]
            port = 80
        """)

        self.assertEqual(
            IniParser().parse(path),
            {"name": "demo", "server": {"port": "80"}},
        )

    def test_dotted_keys_are_expanded(self):
        """Test that 'a.b = c' becomes nested."""
        path = self.write("app.ini", """
            [cache]
            redis.host = r1
            redis.port = 6379
        """)

        self.assertEqual(
            IniParser().parse(path),
            {"cache": {"redis": {"host": "r1", "port": "6379"}}},
        )

    def test_key_case_is_preserved(self):
        """Test that key case is not lowered."""
        path = self.write("app.ini", """
            [App]
            LogLevel = DEBUG
        """)

        self.assertEqual(IniParser().parse(path), {"App": {"LogLevel": "DEBUG"}})

    def test_no_interpolation(self):
        """Test that '%' is taken literally."""
        path = self.write("app.ini", """
            [fmt]
            pattern = %(asctime)s
        """)

        self.assertEqual(IniParser().parse(path)["fmt"]["pattern"], "%(asctime)s")

    def test_invalid_ini(self):
        """Test that malformed content raises ParseError."""
        path = self.write("app.ini", """
            [a]
            x = 1
            [a]
            y = 2
        """)

        with self.assertRaises(ParseError):
            IniParser().parse(path)

    def test_expand_dotted_keys(self):
        """Test the dotted key helper."""
        self.assertEqual(
            expand_dotted_keys({"a.b": "1", "a.c": "2", "d": "3"}),
            {"a": {"b": "1", "c": "2"}, "d": "3"},
        )


class TestXmlParser(ParserTestCase):
    """Test XmlParser."""

    def test_children_of_root(self):
        """Test that root children become keys."""
        path = self.write("app.xml", """\
            <config>
                <name>demo</name>
                <database>
                    <host>localhost</host>
                </database>
            </config>
        """)

        self.assertEqual(
            XmlParser().parse(path),
            {"name": "demo", "database": {"host": "localhost"}},
        )

    def test_repeated_elements_become_lists(self):
        """Test that siblings with the same tag are collected."""
        path = self.write("app.xml", """\
            <config>
                <host>a</host>
                <host>b</host>
                <host>c</host>
            </config>
        """)

        self.assertEqual(XmlParser().parse(path), {"host": ["a", "b", "c"]})

    def test_attributes(self):
        """Test that attributes are stored under '@attributes'."""
        path = self.write("app.xml", """\
            <config>
                <server port="80"><name>web</name></server>
                <flag enabled="true">on</flag>
                <empty/>
            </config>
        """)

        self.assertEqual(
            XmlParser().parse(path),
            {
                "server": {"@attributes": {"port": "80"}, "name": "web"},
                "flag": {"@attributes": {"enabled": "true"}, "#text": "on"},
                "empty": {},
            },
        )

    def test_invalid_xml(self):
        """Test that malformed XML raises ParseError."""
        path = self.write("app.xml", "<config><a></config>")

        with self.assertRaises(ParseError):
            XmlParser().parse(path)

    def test_text_only_root(self):
        """Test that a root with only text is rejected."""
        path = self.write("app.xml", "<config>value</config>")

        with self.assertRaises(ParseError):
            XmlParser().parse(path)


class TestJsonParser(ParserTestCase):
    """Test JsonParser."""

    def test_loads_object(self):
        """Test that a JSON object is loaded."""
        path = self.write("app.json", '{"a": {"b": [1, 2]}, "c": null}')

        self.assertEqual(JsonParser().parse(path), {"a": {"b": [1, 2]}, "c": None})

    def test_invalid_json(self):
        """Test that malformed JSON raises ParseError."""
        path = self.write("app.json", "{invalid json}")

        with self.assertRaises(ParseError):
            JsonParser().parse(path)

    def test_non_object_json(self):
        """Test that a JSON array is rejected."""
        path = self.write("app.json", '["item1", "item2"]')

        with self.assertRaises(ParseError):
            JsonParser().parse(path)

    def test_missing_file(self):
        """Test that an unreadable file raises ParseError."""
        with self.assertRaises(ParseError):
            JsonParser().parse(self.temp_dir / "missing.json")


class TestYamlParser(ParserTestCase):
    """Test YamlParser."""

    def test_loads_mapping(self):
        """Test that a YAML mapping is loaded with native types."""
        path = self.write("app.yaml", """
            debug: true
            workers: 4
            hosts:
              - a
              - b
        """)

        self.assertEqual(
            YamlParser().parse(path),
            {"debug": True, "workers": 4, "hosts": ["a", "b"]},
        )

    def test_empty_document(self):
        """Test that an empty file gives an empty tree."""
        path = self.write("app.yml", "")

        self.assertEqual(YamlParser().parse(path), {})

    def test_invalid_yaml(self):
        """Test that malformed YAML raises ParseError."""
        path = self.write("app.yaml", "a: [1, 2\n")

        with self.assertRaises(ParseError):
            YamlParser().parse(path)

    def test_scalar_document(self):
        """Test that a scalar document is rejected."""
        path = self.write("app.yaml", "just a string\n")

        with self.assertRaises(ParseError):
            YamlParser().parse(path)

    def test_unsafe_tags_are_rejected(self):
        """Test that python-specific tags are not constructed."""
        path = self.write("app.yaml", "a: !!python/object/apply:os.getcwd []\n")

        with self.assertRaises(ParseError):
            YamlParser().parse(path)


if __name__ == "__main__":
    unittest.main()
