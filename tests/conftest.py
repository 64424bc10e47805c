import json

import pytest

from dbml_generator.model import Entity, Field, FieldDefault


def id_field(name="id", type_="Int", autoincrement=False):
    return Field(
        name=name,
        type=type_,
        is_id=True,
        is_required=True,
        has_default_value=autoincrement,
        default=FieldDefault("autoincrement") if autoincrement else None,
    )


def m2m_field(name, target, relation):
    return Field(
        name=name,
        type=target,
        kind="object",
        is_list=True,
        relation_name=relation,
        relation_from_fields=[],
        relation_to_fields=[],
    )


@pytest.fixture
def blog_entities():
    """User 1-N Post (명시적 FK)."""
    user = Entity(
        name="User",
        fields=[
            id_field(autoincrement=True),
            Field(name="email", type="String", is_unique=True, is_required=True),
            Field(name="name", type="String"),
            Field(name="role", type="Role", kind="enum", is_required=True,
                  has_default_value=True, default="USER"),
            Field(name="posts", type="Post", kind="object", is_list=True,
                  relation_name="PostsOnUser", relation_from_fields=[], relation_to_fields=[]),
        ],
        documentation="a user's account",
    )
    post = Entity(
        name="Post",
        fields=[
            id_field(autoincrement=True),
            Field(name="createdAt", type="DateTime", is_required=True,
                  has_default_value=True, default=FieldDefault("now")),
            Field(name="published", type="Boolean", is_required=True,
                  has_default_value=True, default=False),
            Field(name="authorId", type="Int", is_required=True),
            Field(name="author", type="User", kind="object", is_required=True,
                  relation_name="PostsOnUser", relation_from_fields=["authorId"],
                  relation_to_fields=["id"]),
        ],
    )
    return [user, post]


@pytest.fixture
def tag_entities():
    """Post N-M Tag (implicit join table)."""
    post = Entity(name="Post", fields=[id_field(), m2m_field("tags", "Tag", "PostTags")])
    tag = Entity(name="Tag", fields=[id_field(), m2m_field("posts", "Post", "PostTags")])
    return [post, tag]


@pytest.fixture
def dmmf_document():
    return {
        "datamodel": {
            "models": [
                {
                    "name": "Post",
                    "dbName": "posts",
                    "schema": "blog",
                    "documentation": "blog posts",
                    "primaryKey": None,
                    "uniqueFields": [["title", "slug"]],
                    "fields": [
                        {"name": "id", "kind": "scalar", "type": "Int", "isId": True,
                         "isRequired": True, "isList": False, "isUnique": False,
                         "hasDefaultValue": True,
                         "default": {"name": "autoincrement", "args": []}},
                        {"name": "title", "kind": "scalar", "type": "String",
                         "isRequired": True, "hasDefaultValue": True, "default": "untitled"},
                        {"name": "slug", "kind": "scalar", "type": "String", "isRequired": True},
                        {"name": "tags", "kind": "object", "type": "Tag", "isList": True,
                         "relationName": "PostTags", "relationFromFields": [],
                         "relationToFields": [], "isReadOnly": False},
                    ],
                },
                {
                    "name": "Tag",
                    "fields": [
                        {"name": "id", "kind": "scalar", "type": "Int", "isId": True,
                         "isRequired": True},
                        {"name": "posts", "kind": "object", "type": "Post", "isList": True,
                         "relationName": "PostTags", "relationFromFields": [],
                         "relationToFields": []},
                    ],
                },
            ],
            "enums": [],
        }
    }


@pytest.fixture
def dmmf_file(tmp_path, dmmf_document):
    path = tmp_path / "dmmf.json"
    path.write_text(json.dumps(dmmf_document), encoding="utf-8")
    return path
