import pytest

from semantic_types.data_items import (
    BlobItem, BooleanItem, ConceptItem, ContainerItem, ErrorItem, NumberItem, PropertyItem, TimeItem, TimePrecision,
    UriItem, WikiPageItem,
)
from semantic_types.data_items import DataItemType
from semantic_types.utilities import ValidationError
from semantic_types.utilities.special_values import TYPE_URI_BASE
from semantic_types.values import (
    BoolValue, ConceptValue, ErrorValue, ImportValue, NumberValue, PropertyList, PropertyListValue,
    PropertyValue, QuantityValue, RecordValue, StringValue, TemperatureValue, TimeValue, TypesValue,
    UriValue, WikiPageValue, create_data_value,
)


def test_string_value():
    value = StringValue('_txt')
    assert value.parse("  Hello   world ") == BlobItem("Hello world")
    assert value.format(BlobItem("Hello")) == "Hello"
    with pytest.raises(ValidationError):
        value.parse("   ")


def test_code_keeps_inner_whitespace():
    assert StringValue('_cod').parse("  a  =  1 ") == BlobItem("a  =  1")


def test_validate_rejects_other_data_items():
    with pytest.raises(ValidationError):
        StringValue('_txt').format(NumberItem(1))


def test_compare():
    value = NumberValue('_num')
    assert value.compare(NumberItem(1), NumberItem(2)) == -1
    assert value.compare(NumberItem(2), NumberItem(2)) == 0
    assert value.compare(NumberItem(3), NumberItem(2)) == 1


def test_uri_value():
    value = UriValue('_uri')
    assert value.parse("https://example.org/a?b=c") == UriItem("https://example.org/a?b=c")
    with pytest.raises(ValidationError):
        value.parse("example.org")
    with pytest.raises(ValidationError):
        value.parse("http://")
    with pytest.raises(ValidationError):
        value.parse("http://example.org/a b")


def test_email_value():
    value = UriValue('_ema')
    item = value.parse("someone@example.org")
    assert item == UriItem("mailto:someone@example.org")
    assert value.parse("mailto:someone@example.org") == item
    assert value.format(item) == "someone@example.org"
    with pytest.raises(ValidationError):
        value.parse("someone")


def test_telephone_value():
    value = UriValue('_tel')
    item = value.parse("+1 (555) 123.4567")
    assert item == UriItem("tel:+1-555-123-4567")
    assert value.format(item) == "+1-555-123-4567"
    with pytest.raises(ValidationError):
        value.parse("call me")


def test_wiki_page_value():
    value = WikiPageValue('_wpg')
    assert value.parse("main_page") == WikiPageItem("Main page")
    assert value.parse("Category:Cities") == WikiPageItem("Cities", 14)
    assert value.parse("Berlin#Population") == WikiPageItem("Berlin", 0, "", "Population")
    assert value.format(WikiPageItem("Cities", 14)) == "Category:Cities"
    with pytest.raises(ValidationError):
        value.parse("A [broken] title")


def test_wiki_page_value_with_fixed_namespace():
    value = WikiPageValue('_wpp')
    assert value.parse("Has population") == WikiPageItem("Has population", 102)
    assert value.parse("Property:Has population") == WikiPageItem("Has population", 102)
    assert value.format(WikiPageItem("Has population", 102)) == "Has population"
    with pytest.raises(ValidationError):
        value.parse("Category:Cities")


def test_number_value():
    value = NumberValue('_num')
    assert value.parse("1,234.5") == NumberItem(1234.5)
    assert value.parse("-3e2") == NumberItem(-300.0)
    assert value.format(NumberItem(1234.5)) == "1,234.5"
    assert value.format(NumberItem(1000000)) == "1,000,000"
    for invalid in ("abc", "12 km", "-"):
        with pytest.raises(ValidationError):
            value.parse(invalid)


@pytest.mark.parametrize("user_value, kelvin", [
    ("300 K", 300),
    ("20 °C", 293.15),
    ("32 °F", 273.15),
    ("491.67 °R", 273.15),
    ("0 celsius", 273.15),
])
def test_temperature_value(user_value, kelvin):
    assert TemperatureValue('_tem').parse(user_value).number == pytest.approx(kelvin)


def test_temperature_value_errors():
    value = TemperatureValue('_tem')
    for invalid in ("20", "20 meters", "-300 °C"):
        with pytest.raises(ValidationError):
            value.parse(invalid)
    assert value.format(NumberItem(293.15)) == "293.15 K"


def test_quantity_value():
    value = QuantityValue('_qty')
    assert value.parse("12 km") == NumberItem(12)
    assert value.parse("12") == NumberItem(12)
    with pytest.raises(ValidationError):
        value.parse("12 km 5")


def test_time_value():
    value = TimeValue('_dat')
    assert value.parse("1969") == TimeItem(1969, precision=TimePrecision.YEAR)
    assert value.parse("-300") == TimeItem(-300, precision=TimePrecision.YEAR)
    assert value.parse("1969-07") == TimeItem(1969, 7, precision=TimePrecision.MONTH)
    assert value.parse("1969-07-20") == TimeItem(1969, 7, 20, precision=TimePrecision.DAY)
    assert value.parse("1969-07-20T20:17:40") == TimeItem(1969, 7, 20, 20, 17, 40)
    assert value.format(TimeItem(1969, 7, 20, precision=TimePrecision.DAY)) == "1969-07-20"
    assert value.format(TimeItem(1969, 7, 20, 20, 17, 40)) == "1969-07-20T20:17:40"
    assert value.compare(TimeItem(-300), TimeItem(1969)) == -1
    for invalid in ("0", "0-05", "1969-13", "July 1969"):
        with pytest.raises(ValidationError):
            value.parse(invalid)


@pytest.mark.parametrize("user_value", ["1969", "-300", "1969-07", "1969-07-20", "1969-07-20T00:00:00"])
def test_time_value_keeps_precision(user_value):
    value = TimeValue('_dat')
    assert value.format(value.parse(user_value)) == user_value


def test_year_is_not_january_first():
    value = TimeValue('_dat')
    assert value.parse("1969") != value.parse("1969-01-01")


def test_bool_value():
    value = BoolValue('_boo')
    assert value.parse("Yes") == BooleanItem(True)
    assert value.parse("false") == BooleanItem(False)
    assert value.format(BooleanItem(True)) == "true"
    with pytest.raises(ValidationError):
        value.parse("maybe")


def test_record_value():
    properties = PropertyList([PropertyItem("Has name"), PropertyItem("Has age")])
    value = RecordValue('_rec', properties=properties, field_values=[StringValue('_txt'), NumberValue('_num')])

    item = value.parse("Ada; 36")
    assert item == ContainerItem(((PropertyItem("Has name"), BlobItem("Ada")), (PropertyItem("Has age"), NumberItem(36))))
    assert value.format(item) == "Ada; 36"
    assert value.format(value.parse("; 36")) == "; 36"
    assert value.format(value.parse("Ada")) == "Ada"

    with pytest.raises(ValidationError):
        value.parse("Ada; 36; extra")
    with pytest.raises(ValidationError):
        value.parse("Ada; old")


def test_record_value_keeps_separators_inside_field_values():
    properties = PropertyList([PropertyItem("Has key"), PropertyItem("Has code")])
    value = RecordValue('_rec', properties=properties, field_values=[StringValue('_txt'), StringValue('_cod')])
    assert value.format(value.parse("x")) == "x"
    item = ContainerItem(((PropertyItem("Has key"), BlobItem("x")), (PropertyItem("Has code"), BlobItem("y;"))))
    assert value.format(item) == "x; y;"


def test_record_value_without_fields():
    with pytest.raises(ValidationError):
        RecordValue('_rec').parse("a; b")
    with pytest.raises(ValueError):
        RecordValue('_rec', properties=PropertyList([PropertyItem("A")]))


def test_property_list_value():
    value = PropertyListValue('__pls')
    assert value.parse("has name; has age") == BlobItem("Has_name;Has_age")
    assert value.format(BlobItem("Has_name;Has_age")) == "Has name; Has age"
    with pytest.raises(ValidationError):
        value.parse("Has name; Has name")
    with pytest.raises(ValidationError):
        value.parse("Has name;;Has age")


def test_property_list_value_normalizes_like_property_names():
    value = PropertyListValue('__pls')
    assert value.parse("has  name") == BlobItem("Has_name")
    assert value.parse("has_name; has age") == BlobItem("Has_name;Has_age")
    for invalid in ("Has [x]", "Has name; has  name", "-Has part"):
        with pytest.raises(ValidationError):
            value.parse(invalid)


def test_property_list_rejects_duplicates_without_changing():
    properties = PropertyList([PropertyItem("Has_name")])
    with pytest.raises(ValueError):
        properties.append(PropertyItem("Has_name"))
    with pytest.raises(ValueError):
        properties.extend([PropertyItem("Has_age"), PropertyItem("Has_age")])
    assert len(properties) == 1
    assert list(properties) == [PropertyItem("Has_name")]


def test_property_list_only_accepts_properties():
    with pytest.raises(TypeError):
        PropertyList([BlobItem("Has name")])


def test_property_value():
    value = PropertyValue('__pro')
    assert value.parse("has population") == PropertyItem("Has_population")
    assert value.parse("-Has part") == PropertyItem("Has_part", inverse=True)
    assert value.format(PropertyItem("Has_part", inverse=True)) == "-Has part"
    with pytest.raises(ValidationError):
        value.parse("Has [x]")


def test_types_value(registry):
    value = TypesValue('__typ', registry=registry)
    item = value.parse("number")
    assert item == UriItem(TYPE_URI_BASE + '_num')
    assert value.get_type_id(item) == '_num'
    assert value.format(item) == "Number"
    assert value.parse("Integer") == item
    assert value.parse("_num") == item
    for invalid in ("No such type", "__con"):
        with pytest.raises(ValidationError):
            value.parse(invalid)


def test_types_value_uses_process_wide_registry():
    assert TypesValue('__typ').parse("Date") == UriItem(TYPE_URI_BASE + '_dat')


def test_concept_error_and_import_values():
    assert ConceptValue('__con').parse("[[Category:City]]") == ConceptItem("[[Category:City]]")
    assert ErrorValue('__err').parse("Something failed") == ErrorItem(("Something failed",))
    assert ErrorValue('__err').parse("") == ErrorItem(())

    value = ImportValue('__imp')
    item = value.parse("foaf:knows")
    assert item == BlobItem("foaf:knows")
    assert value.get_namespace_prefix(item) == "foaf"
    with pytest.raises(ValidationError):
        value.parse("knows")


def test_create_data_value(registry):
    value = create_data_value(registry, '_tem')
    assert isinstance(value, TemperatureValue)
    assert value.type_id == '_tem'

    types_value = create_data_value(registry, '__typ', registry=registry)
    assert types_value.parse("Text") == UriItem(TYPE_URI_BASE + '_txt')


def test_create_data_value_passes_its_registry(unlabeled_registry):
    unlabeled_registry.register_data_type('_num', NumberValue, DataItemType.NUMBER, label="Amount")
    types_value = create_data_value(unlabeled_registry, '__typ')
    assert types_value.registry is unlabeled_registry
    assert types_value.parse("Amount") == UriItem(TYPE_URI_BASE + '_num')
    assert types_value.format(UriItem(TYPE_URI_BASE + '_num')) == "Amount"


def test_create_data_value_falls_back_to_text(registry):
    value = create_data_value(registry, '_geo')
    assert isinstance(value, StringValue)
    assert value.type_id == registry.get_default_data_item_type_id(DataItemType.BLOB)
