import pytest

from phpsolver.resolution import InheritanceResolver, find_constant, find_method, find_property, implements


@pytest.fixture
def resolver(make_index):
    index = make_index({
        "classes": {
            # A extends B, B extends A
            "A": {"parent": "B"},
            "B": {"parent": "A", "methods": {"onlyB": {"typ": "int"}}},
            "Countable": {"is_interface": True, "methods": {"count": {"typ": "int"}}},
            "Collection": {
                "is_interface": True,
                "parent_interfaces": ["Countable"],
                "constants": {"KIND": {"value": "'collection'"}},
            },
            "HasTable": {"is_interface": True, "constants": {"TABLE": {"value": "1"}}},
            "Model": {
                "interfaces": ["HasTable"],
                "traits": ["Timestamps"],
                "constants": {"TABLE": {"value": "2"}, "OWN": {"value": "3"}},
                "properties": {"id": {"typ": "int"}},
                "methods": {"save": {"typ": "bool"}},
            },
            "User": {"parent": "Model", "methods": {"save": {"typ": "void"}}},
            "ItemList": {"interfaces": ["Collection"]},
            # K extends L, L extends K
            "K": {"is_interface": True, "parent_interfaces": ["L"]},
            "L": {"is_interface": True, "parent_interfaces": ["K"]},
            "Looped": {"interfaces": ["K"], "traits": ["SelfUsing"]},
        },
        "traits": {
            "Timestamps": {"is_trait": True, "methods": {"touch": {"typ": "static"}}},
            "SelfUsing": {"is_trait": True, "traits": ["SelfUsing"]},
        },
    })
    return InheritanceResolver(index)


def test_find_method_own_and_inherited(resolver):
    found = resolver.find_method("User", "save")
    assert found.impl_class_name == "User"
    assert str(found.info.typ) == "void"

    assert resolver.find_method("Model", "save").impl_class_name == "Model"


def test_find_method_through_trait(resolver):
    found = resolver.find_method("User", "touch")
    assert found is not None
    assert found.impl_class_name == "Timestamps"


def test_find_method_through_parent_interface(resolver):
    found = resolver.find_method("Collection", "count")
    assert found.impl_class_name == "Countable"


def test_find_method_cyclic_parents_is_not_found(resolver):
    assert resolver.find_method("A", "missing") is None
    assert resolver.find_method("A", "onlyB").impl_class_name == "B"


def test_find_method_cyclic_trait_and_interfaces(resolver):
    assert resolver.find_method("Looped", "missing") is None
    assert resolver.find_method("K", "missing") is None


def test_find_method_unknown_class(resolver):
    assert resolver.find_method("Nope", "save") is None


def test_find_property_walks_parents_only(resolver):
    found = resolver.find_property("User", "id")
    assert found.impl_class_name == "Model"
    assert resolver.find_property("User", "touch") is None
    assert resolver.find_property("A", "id") is None


def test_find_constant_interface_before_own(resolver):
    found = resolver.find_constant("Model", "TABLE")
    assert found.impl_class_name == "HasTable"
    assert found.info.value == "1"


def test_find_constant_own_and_inherited(resolver):
    assert resolver.find_constant("Model", "OWN").info.value == "3"
    assert resolver.find_constant("User", "TABLE").impl_class_name == "HasTable"


def test_find_constant_through_interface_parents(resolver):
    assert resolver.find_constant("ItemList", "KIND").impl_class_name == "Collection"
    assert resolver.find_constant("Looped", "KIND") is None
    assert resolver.find_constant("B", "KIND") is None


def test_implements_directly_and_through_parent(resolver):
    assert resolver.implements("Model", "HasTable")
    assert resolver.implements("User", "HasTable")
    assert not resolver.implements("User", "Countable")


def test_implements_through_interface_inheritance(resolver):
    assert resolver.implements("ItemList", "Countable")
    assert resolver.implements("Looped", "L")
    assert not resolver.implements("Looped", "Countable")
    assert not resolver.implements("A", "Countable")
    assert not resolver.implements("Nope", "Countable")


def test_module_level_helpers(zoo_index):
    assert find_method(zoo_index, "Dog", "create").impl_class_name == "Animal"
    assert find_property(zoo_index, "Dog", "legs").impl_class_name == "Animal"
    assert find_constant(zoo_index, "Repo", "TABLE").info.value == "'repo'"
    assert implements(zoo_index, "Repo", "RepoInterface")
