import pytest

from inputgraph.core.catalog import InputCatalog
from inputgraph.core.schema import parse_schema
from inputgraph.core.synthesizer import DeclarationSynthesizer


USER_SCHEMA = {
    "models": {
        "User": {
            "fields": [
                {"name": "id", "type": "String", "id": True},
                {"name": "birth", "type": "DateTime"},
                {"name": "died", "type": "DateTime?"},
                {"name": "age", "type": "Int"},
                {"name": "countComments", "type": "Int?"},
                {"name": "role", "type": "Role"},
            ]
        }
    },
    "enums": {"Role": ["USER", "ADMIN"]},
}

BLOG_SCHEMA = {
    "models": {
        "User": {
            "fields": [
                {"name": "id", "type": "Int", "id": True, "default": "autoincrement"},
                {"name": "posts", "type": "Post[]"},
            ]
        },
        "Post": {
            "fields": [
                {"name": "id", "type": "Int", "id": True, "default": "autoincrement"},
                {"name": "author", "type": "User", "relation": {"fields": ["authorId"]}},
                {"name": "authorId", "type": "Int"},
            ]
        },
    }
}

FOLLOWS_SCHEMA = {
    "models": {
        "User": {
            "fields": [
                {"name": "id", "type": "String", "id": True},
                {"name": "following", "type": "User[]", "relation": {"name": "UserFollows"}},
                {"name": "followers", "type": "User[]", "relation": {"name": "UserFollows"}},
            ]
        }
    }
}

DUMMY_SCHEMA = {
    "models": {
        "Dummy": {
            "fields": [
                {"name": "id", "type": "String", "id": True},
                {"name": "date", "type": "DateTime?"},
                {"name": "int", "type": "Int?"},
                {"name": "float", "type": "Float?"},
                {"name": "bytes", "type": "Bytes?"},
                {"name": "decimal", "type": "Decimal?"},
                {"name": "decimals", "type": "Decimal[]"},
                {"name": "bigInt", "type": "BigInt?"},
                {"name": "json", "type": "Json?"},
                {"name": "friends", "type": "String[]"},
                {"name": "active", "type": "Boolean"},
                {"name": "tags", "type": "Role[]"},
                {"name": "role", "type": "Role?"},
                {"name": "owner", "type": "Owner?", "relation": {"fields": ["ownerId"]}},
                {"name": "ownerId", "type": "String?"},
                {"name": "secret", "type": "String", "hidden": True},
            ]
        },
        "Owner": {
            "fields": [
                {"name": "id", "type": "String", "id": True},
                {"name": "email", "type": "String", "unique": True},
                {"name": "dummies", "type": "Dummy[]"},
                {"name": "settings", "type": "Json"},
            ]
        },
    },
    "enums": {"Role": ["USER", "ADMIN"]},
}


@pytest.fixture
def user_registry():
    return parse_schema(USER_SCHEMA)


@pytest.fixture
def blog_registry():
    return parse_schema(BLOG_SCHEMA)


@pytest.fixture
def follows_registry():
    return parse_schema(FOLLOWS_SCHEMA)


@pytest.fixture
def dummy_registry():
    return parse_schema(DUMMY_SCHEMA)


@pytest.fixture
def find_input():
    """Return the catalog descriptor with the given name."""
    def find(registry, name):
        for descriptor in InputCatalog(registry).build():
            if descriptor.name == name:
                return descriptor
        raise AssertionError(f"Failed to find {name}")
    return find


@pytest.fixture
def synthesize(find_input):
    """Synthesize the named catalog input of a registry."""
    def run(registry, name, options=None):
        return DeclarationSynthesizer(registry, options).synthesize(find_input(registry, name))
    return run
