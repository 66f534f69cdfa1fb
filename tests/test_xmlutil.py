import xml.etree.ElementTree as ET

from exadrums.xmlutil import XmlElement, create_xml_element

DOC = "<root><a>1</a><b>two words</b><a>3</a><c x='5' y='yes'/></root>"


def _root():
    return ET.fromstring(DOC)


def test_iterate_named_children():
    values = [child.get_value(int) for child in XmlElement(_root(), "a")]
    assert values == [1, 3]


def test_iterate_all_children():
    tags = [child.element.tag for child in XmlElement(_root())]
    assert tags == ["a", "b", "a", "c"]


def test_get_value_reads_first_word_for_strings():
    element = XmlElement(_root()).first_child_element("b")
    assert element.get_value(str) == "two"
    assert element.text == "two words"


def test_get_value_without_text_is_zero():
    element = XmlElement(_root()).first_child_element("c")
    assert element.get_value(int) == 0
    assert element.get_value(str) == ""


def test_missing_child_is_falsy_and_gives_zero():
    missing = XmlElement(_root()).first_child_element("zzz")
    assert not missing
    assert missing.get_value(float) == 0.0
    assert list(missing) == []


def test_attribute_present_and_missing():
    element = XmlElement(_root()).first_child_element("c")
    assert element.attribute("x", int) == 5
    assert element.attribute("y", str) == "yes"
    assert element.attribute("nope", int) == 0


def test_create_element_with_text_and_attributes():
    element = create_xml_element("kit", 42, [("name", "rock"), ("enabled", True)])
    assert element.tag == "kit"
    assert element.text == "42"
    assert element.get("name") == "rock"
    assert element.get("enabled") == "1"


def test_create_element_empty_text_left_unset():
    element = create_xml_element("empty", "", {"k": 7})
    assert element.text is None
    assert element.get("k") == "7"


def test_created_element_readable_by_wrapper():
    parent = ET.Element("root")
    parent.append(create_xml_element("value", 12))
    assert XmlElement(parent).first_child_element("value").get_value(int) == 12