import pytest

from jsonapi_paginator import InvalidLinksError, JSONAPIDocumentBuilder, JSONAPIErrorBuilder
from jsonapi_paginator.pagination import OffsetPagination


@pytest.fixture
def builder():
    return JSONAPIDocumentBuilder()


def test_build_collection_with_paginator(builder):
    paginator = OffsetPagination(
        url="/articles?page[offset]=10",
        limit=10,
        total=25,
        link_style="object",
    )

    document = builder.build_collection(
        [{"type": "articles", "id": "11"}],
        links={"self": "/articles?page[offset]=10"},
        paginator=paginator,
    )

    assert document == {
        "data": [{"type": "articles", "id": "11"}],
        "links": {
            "self": "/articles?page[offset]=10",
            "first": {"href": "/articles?page[offset]=0&page[limit]=10"},
            "last": {"href": "/articles?page[offset]=20&page[limit]=10"},
        },
        "meta": {"page": {"total": 25, "limit": 10, "offset": 10}},
    }


def test_build_collection_single_page(builder):
    paginator = OffsetPagination(url="/articles", limit=10, total=3)

    document = builder.build_collection([], paginator=paginator)

    assert document == {
        "data": [],
        "meta": {"page": {"total": 3, "limit": 10, "offset": 0}},
    }


def test_build_single(builder):
    document = builder.build_single(
        {"type": "articles", "id": "1"},
        included=[{"type": "people", "id": "9"}],
        links={"self": "/articles/1"},
        meta={"copyright": "me"},
    )

    assert document == {
        "data": {"type": "articles", "id": "1"},
        "included": [{"type": "people", "id": "9"}],
        "links": {"self": "/articles/1"},
        "meta": {"copyright": "me"},
    }


def test_build_single_null_data(builder):
    assert builder.build_single(None) == {"data": None}


def test_invalid_links_rejected(builder):
    with pytest.raises(InvalidLinksError):
        builder.build_single({"type": "articles", "id": "1"}, links={"self": 1})


def test_error_object_requires_a_member():
    with pytest.raises(ValueError):
        JSONAPIErrorBuilder().error_object(title=None)


def test_error_object_skips_unset_members():
    error = JSONAPIErrorBuilder().error_object(status="400", detail=None, source={"parameter": "page[limit]"})

    assert error == {"status": "400", "source": {"parameter": "page[limit]"}}


def test_error_object_rejects_unknown_members():
    with pytest.raises(ValueError, match="links"):
        JSONAPIErrorBuilder().error_object(status="400", links={})


def test_error_from_exception():
    errors = JSONAPIErrorBuilder()

    error = errors.from_exception(InvalidLinksError("bad links"))

    assert error == {
        "status": "500",
        "code": "InvalidLinksError",
        "title": "Invalid Links",
        "detail": "bad links",
    }
    assert JSONAPIDocumentBuilder().build_error([error]) == {"errors": [error]}


def test_error_from_other_exception():
    error = JSONAPIErrorBuilder().from_exception(RuntimeError(), status="503")

    assert error == {"status": "503", "code": "RuntimeError", "title": "Internal Server Error"}
