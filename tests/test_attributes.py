from zettelstore.attributes import Attributes


def test_has_default():
    assert Attributes().has_default() is False
    assert Attributes({"-": "value"}).has_default() is True


def test_remove_default():
    attrs = Attributes({"-": "value", "a": "b"})
    attrs.remove_default()
    assert attrs.has_default() is False
    assert attrs.attrs == {"a": "b"}


def test_clone_empty():
    clone = Attributes().clone()
    assert clone.attrs == {}


def test_clone_is_not_aliased():
    orig = Attributes({"": "0", "-": "1", "a": "b"})
    clone = orig.clone()
    assert clone.attrs == {"": "0", "-": "1", "a": "b"}
    clone.attrs["a"] = "c"
    assert orig.attrs["a"] == "b"


def test_set_get_remove():
    attrs = Attributes()
    assert attrs.set("k", "v") is attrs
    assert attrs.get("k") == "v"
    attrs.remove("k")
    assert attrs.get("k") is None
    attrs.remove("missing")
    assert attrs.attrs == {}


def test_add_class_without_duplicates():
    attrs = Attributes()
    attrs.add_class("one").add_class("two").add_class("one")
    assert attrs.get_classes() == ["one", "two"]
    assert attrs.get("class") == "one two"


def test_get_classes_without_class():
    assert Attributes({"a": "b"}).get_classes() == []