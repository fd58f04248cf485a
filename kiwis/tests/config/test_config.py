import logging

import pytest

import kiwis as ks
from kiwis._config import config as cf
from kiwis._config.config import OptionError


@pytest.fixture
def clean_config(monkeypatch):
    """
    Run a test against an empty option registry.
    """
    with monkeypatch.context() as m:
        m.setattr(cf, "_global_config", {})
        m.setattr(cf, "options", cf.DictWrapper(cf._global_config))
        m.setattr(cf, "_registered_options", {})
        yield


@pytest.mark.usefixtures("clean_config")
class TestConfig:
    def test_api(self):
        # the kiwis object exposes the user API
        assert hasattr(ks, "get_option")
        assert hasattr(ks, "set_option")
        assert hasattr(ks, "reset_option")
        assert hasattr(ks, "describe_option")

    def test_is_one_of_registered(self):
        cf.register_option("a", 1)
        assert cf.get_option("a") == 1

    def test_register_option(self):
        cf.register_option("a", 1, "doc")

        # can't register an already registered option
        msg = "Option 'a' has already been registered"
        with pytest.raises(OptionError, match=msg):
            cf.register_option("a", 1, "doc")

        # can't register an already registered option
        msg = "Path prefix to option 'a' is already an option"
        with pytest.raises(OptionError, match=msg):
            cf.register_option("a.b.c.d1", 1, "doc")

        # no python keywords
        msg = "for is a python keyword"
        with pytest.raises(ValueError, match=msg):
            cf.register_option("for", 0)

        # must be valid identifier (ensure attribute access works)
        msg = "oh my goddess! is not a valid identifier"
        with pytest.raises(ValueError, match=msg):
            cf.register_option("Oh my Goddess!", 0)

        # we can register options several levels deep
        # without predefining the intermediate steps
        # and we can define differently named options
        # in the same namespace
        cf.register_option("k.b.c.d1", 1, "doc")
        cf.register_option("k.b.c.d2", 1, "doc")

    def test_get_default_val(self):
        cf.register_option("a", 1, validator=cf.is_int)
        cf.set_option("a", 5)
        assert cf.get_default_val("a") == 1

    def test_is_bool(self):
        cf.register_option("flag", True, validator=cf.is_bool)
        cf.set_option("flag", False)
        with pytest.raises(ValueError, match="Value must have type"):
            cf.set_option("flag", 0)

    def test_reserved_key(self):
        with pytest.raises(OptionError, match="reserved key"):
            cf.register_option("all", 1)

    def test_describe_option(self):
        cf.register_option("a", 1, "doc")
        cf.register_option("b", 1, "doc2")
        cf.register_option("c.d.e1", 1, "doc3")
        cf.register_option("l", "foo")

        # non-existent keys raise OptionError
        msg = r"No such keys\(s\)"
        with pytest.raises(OptionError, match=msg):
            cf.describe_option("no.such.key")

        # we can get the description for any key we registered
        assert "doc" in cf.describe_option("a", _print_desc=False)
        assert "doc2" in cf.describe_option("b", _print_desc=False)
        assert "doc3" in cf.describe_option("c.d.e1", _print_desc=False)
        assert "No description available." in cf.describe_option(
            "l", _print_desc=False
        )

        # default and current values are reported
        cf.set_option("l", "bar")
        result = cf.describe_option("l", _print_desc=False)
        assert "[default: 'foo'] [currently: 'bar']" in result

    def test_case_insensitive(self):
        cf.register_option("KanBAN", 1, "doc")

        assert "doc" in cf.describe_option("kanbaN", _print_desc=False)
        assert cf.get_option("kanBaN") == 1
        cf.set_option("KanBan", 2)
        assert cf.get_option("kAnBaN") == 2

        # gets of non-existent keys fail
        msg = r"No such keys\(s\): 'no_such_option'"
        with pytest.raises(OptionError, match=msg):
            cf.get_option("no_such_option")

    def test_get_option(self):
        cf.register_option("a", 1, "doc")
        cf.register_option("b.c", "hullo", "doc2")
        cf.register_option("b.b", None, "doc2")

        # gets of existing keys succeed
        assert cf.get_option("a") == 1
        assert cf.get_option("b.c") == "hullo"
        assert cf.get_option("b.b") is None

        # gets of non-existent keys fail
        msg = r"No such keys\(s\): 'no_such_option'"
        with pytest.raises(OptionError, match=msg):
            cf.get_option("no_such_option")

    def test_ambiguous_key(self):
        cf.register_option("display.max_rows", 1)
        cf.register_option("display.max_seq_items", 1)
        with pytest.raises(OptionError, match="Pattern matched multiple keys"):
            cf.get_option("display.max")

    def test_set_option(self):
        cf.register_option("a", 1, "doc")
        cf.register_option("b.c", "hullo", "doc2")
        cf.register_option("b.b", None, "doc2")

        cf.set_option("a", 2)
        cf.set_option("b.c", "wurld")
        cf.set_option("b.b", 1.1)

        assert cf.get_option("a") == 2
        assert cf.get_option("b.c") == "wurld"
        assert cf.get_option("b.b") == 1.1

        msg = r"No such keys\(s\): 'no.such.key'"
        with pytest.raises(OptionError, match=msg):
            cf.set_option("no.such.key", None)

    def test_set_option_empty_args(self):
        msg = "Must provide an even number of non-keyword arguments"
        with pytest.raises(ValueError, match=msg):
            cf.set_option()

    def test_set_option_uneven_args(self):
        msg = "Must provide an even number of non-keyword arguments"
        with pytest.raises(ValueError, match=msg):
            cf.set_option("a.b", 2, "b.c")

    def test_set_option_multiple(self):
        cf.register_option("a", 1, "doc")
        cf.register_option("b.c", "hullo", "doc2")
        cf.register_option("b.b", None, "doc2")

        cf.set_option("a", "2", "b.c", None, "b.b", 10.0)

        assert cf.get_option("a") == "2"
        assert cf.get_option("b.c") is None
        assert cf.get_option("b.b") == 10.0

    def test_set_option_logs(self, caplog):
        cf.register_option("a", 1)
        with caplog.at_level(logging.DEBUG, logger="kiwis._config.config"):
            cf.set_option("a", 2)
        assert "option 'a' set to 2" in caplog.text

    def test_validation(self):
        cf.register_option("a", 1, "doc", validator=cf.is_int)
        cf.register_option("d", 1, "doc", validator=cf.is_nonnegative_int)
        cf.register_option("b.c", "hullo", "doc2", validator=cf.is_text)

        msg = "Value must have type '<class 'int'>'"
        with pytest.raises(ValueError, match=msg):
            cf.register_option("a.b.c.d2", "NO", "doc", validator=cf.is_int)

        cf.set_option("a", 2)  # int is_int
        cf.set_option("b.c", "wurld")  # str is_str
        cf.set_option("d", 2)
        cf.set_option("d", None)  # non-negative int can be None

        # None not is_int
        with pytest.raises(ValueError, match=msg):
            cf.set_option("a", None)
        with pytest.raises(ValueError, match=msg):
            cf.set_option("a", "ab")

        msg = "Value must be a nonnegative integer or None"
        with pytest.raises(ValueError, match=msg):
            cf.set_option("d", -2)

        msg = r"Value must be an instance of <class 'str'>\|<class 'bytes'>"
        with pytest.raises(ValueError, match=msg):
            cf.set_option("b.c", 1)

        # a failed validation leaves the value untouched
        assert cf.get_option("a") == 2

    def test_positive_int(self):
        cf.register_option("a", 1, validator=cf.is_positive_int)
        for bad in [0, -1, True, 1.5]:
            with pytest.raises(ValueError, match="Value must be a positive integer"):
                cf.set_option("a", bad)

    def test_reset_option(self):
        cf.register_option("a", 1, "doc", validator=cf.is_int)
        cf.register_option("b.c", "hullo", "doc2", validator=cf.is_str)
        assert cf.get_option("a") == 1
        assert cf.get_option("b.c") == "hullo"

        cf.set_option("a", 2)
        cf.set_option("b.c", "wurld")
        assert cf.get_option("a") == 2
        assert cf.get_option("b.c") == "wurld"

        cf.reset_option("a")
        assert cf.get_option("a") == 1
        assert cf.get_option("b.c") == "wurld"
        cf.reset_option("b.c")
        assert cf.get_option("a") == 1
        assert cf.get_option("b.c") == "hullo"

    def test_reset_option_all(self):
        cf.register_option("a", 1, "doc", validator=cf.is_int)
        cf.register_option("b.c", "hullo", "doc2", validator=cf.is_str)

        cf.set_option("a", 2)
        cf.set_option("b.c", "wurld")

        cf.reset_option("all")
        assert cf.get_option("a") == 1
        assert cf.get_option("b.c") == "hullo"

    def test_reset_short_pattern(self):
        cf.register_option("ab.c", 1)
        cf.register_option("ab.d", 1)
        with pytest.raises(ValueError, match="at least 4 characters"):
            cf.reset_option("ab")

    def test_callback(self):
        k = [None]
        v = [None]

        def callback(key):
            k.append(key)
            v.append(cf.get_option(key))

        cf.register_option("d.a", "foo", cb=callback)
        cf.register_option("d.b", "foo", cb=callback)

        del k[-1], v[-1]
        cf.set_option("d.a", "fooz")
        assert k[-1] == "d.a"
        assert v[-1] == "fooz"

        del k[-1], v[-1]
        cf.set_option("d.b", "boo")
        assert k[-1] == "d.b"
        assert v[-1] == "boo"

        del k[-1], v[-1]
        cf.reset_option("d.b")
        assert k[-1] == "d.b"

    def test_set_ContextManager(self):
        def eq(val):
            assert cf.get_option("a") == val

        cf.register_option("a", 0)
        eq(0)
        with cf.option_context("a", 15):
            eq(15)
            with cf.option_context("a", 25):
                eq(25)
            eq(15)
        eq(0)

        cf.set_option("a", 17)
        eq(17)

    def test_option_context_invalid(self):
        msg = r"Need to invoke as option_context\(pat, val, \[\(pat, val\), \.\.\.\]\)\."
        with pytest.raises(ValueError, match=msg):
            cf.option_context("a")

    def test_option_context_scope(self):
        # Ensure that creating a context does not affect the existing
        # environment as it is supposed to be used with the `with` statement.
        original_value = 60
        context_value = 10
        option_name = "a"

        cf.register_option(option_name, original_value)

        # Ensure creating contexts didn't affect the current context.
        ctx = cf.option_context(option_name, context_value)
        assert cf.get_option(option_name) == original_value

        # Ensure the correct value is available inside the context.
        with ctx:
            assert cf.get_option(option_name) == context_value

        # Ensure the current context is reset
        assert cf.get_option(option_name) == original_value

    def test_attribute_access(self):
        holder = []

        def f3(key):
            holder.append(True)

        cf.register_option("a", 0)
        cf.register_option("c", 0, cb=f3)
        options = cf.options

        assert options.a == 0
        with cf.option_context("a", 15):
            assert options.a == 15

        options.a = 500
        assert cf.get_option("a") == 500

        cf.reset_option("a")
        assert options.a == cf.get_option("a")

        msg = "You can only set the value of existing options"
        with pytest.raises(OptionError, match=msg):
            options.b = 1
        with pytest.raises(OptionError, match=msg):
            options.display = 1

        # make sure callback kicks when using this form of setting
        options.c = 1
        assert len(holder) == 1

    def test_config_prefix(self):
        with cf.config_prefix("base"):
            cf.register_option("a", 1, "doc1")
            cf.register_option("b", 2, "doc2")
            assert cf.get_option("a") == 1
            assert cf.get_option("b") == 2

            cf.set_option("a", 3)
            cf.set_option("b", 4)
            assert cf.get_option("a") == 3
            assert cf.get_option("b") == 4

        assert cf.get_option("base.a") == 3
        assert cf.get_option("base.b") == 4
        assert "doc1" in cf.describe_option("base.a", _print_desc=False)
        assert "doc2" in cf.describe_option("base.b", _print_desc=False)

        cf.reset_option("base.a")
        cf.reset_option("base.b")

        with cf.config_prefix("base"):
            assert cf.get_option("a") == 1
            assert cf.get_option("b") == 2

    def test_dictwrapper_getattr(self):
        options = cf.options
        with pytest.raises(OptionError, match="No such option"):
            options.bananas
        assert not hasattr(options, "bananas")

    def test_option_error_is_key_and_attribute_error(self):
        with pytest.raises(KeyError):
            cf.get_option("missing")
        with pytest.raises(AttributeError):
            cf.options.missing


class TestRegisteredOptions:
    @pytest.mark.parametrize(
        "key, default",
        [
            ("display.max_rows", 25),
            ("display.max_colwidth", 42),
            ("display.na_rep", "N/A"),
            ("display.pprint_nest_depth", 3),
            ("display.max_seq_items", 100),
            ("io.json.indent", "\t"),
        ],
    )
    def test_defaults(self, key, default):
        assert ks.get_option(key) == default

    @pytest.mark.parametrize(
        "key, value",
        [
            ("display.max_rows", 0),
            ("display.max_rows", "10"),
            ("display.max_colwidth", 3),
            ("display.na_rep", None),
            ("display.max_seq_items", -1),
            ("io.json.indent", 1.5),
        ],
    )
    def test_invalid_values(self, key, value):
        with pytest.raises(ValueError, match="Value must"):
            ks.set_option(key, value)

    def test_options_attribute_access(self):
        assert ks.options.display.max_rows == 25
        ks.options.display.max_rows = 10
        assert ks.get_option("display.max_rows") == 10
        ks.reset_option("display.max_rows")
        assert ks.options.display.max_rows == 25

    def test_describe_all(self):
        result = ks.describe_option("display", _print_desc=False)
        assert "display.max_rows" in result
        assert "display.na_rep" in result

    def test_dynamic_docstring(self):
        assert "display.[max_colwidth" in ks.get_option.__doc__
        assert "io.json.[indent]" in ks.set_option.__doc__
