import pytest

from storefront.catalog import (
    CATALOG,
    ProductFilter,
    categories,
    extract_product,
    find_product,
    search_catalog,
)


def test_search_catalog_matches_name_and_description_case_insensitively():
    names = [p["name"] for p in search_catalog("SOFA")]
    assert "Sofa Esty" in names
    assert "Set Elinda" in names  # "Kombinasi sofa dan meja" description


def test_search_catalog_by_category():
    results = search_catalog("", "meja")
    assert results
    assert all(p["category"] == "meja" for p in results)
    assert len(search_catalog(None, "all")) == len(CATALOG)


def test_categories_keep_catalog_order():
    assert categories() == ["sofa", "meja", "set"]


def test_find_product():
    assert find_product("sofa-esty")["name"] == "Sofa Esty"
    assert find_product("missing") is None


def test_extract_product_coerces_missing_fields():
    assert extract_product({"name": "  ", "price": "abc"}) == {"name": "Unknown", "price": 0, "image": ""}
    assert extract_product(find_product("meja-konsol"))["price"] == 0


def test_product_filter_selects_category():
    product_filter = ProductFilter()
    visible = product_filter.select("set")
    assert product_filter.active_filter == "set"
    assert {p["category"] for p in visible} == {"set"}
    assert product_filter.should_display("set")
    assert not product_filter.should_display("sofa")


def test_product_filter_blank_selection_shows_everything():
    product_filter = ProductFilter()
    product_filter.select("sofa")
    assert len(product_filter.select("")) == len(CATALOG)
    assert product_filter.active_filter == "all"


def test_product_filter_unknown_category_hides_everything():
    assert ProductFilter().select("lemari") == []


@pytest.mark.asyncio
async def test_product_filter_start_resets_filter():
    product_filter = ProductFilter()
    product_filter.select("meja")
    await product_filter.start()
    assert product_filter.active_filter == "all"
