"""Tests for landing.services.catalog."""

from landing.services.catalog import ServiceCatalog


class TestFindByUrl:
    def test_round_trip_for_every_record(self, catalog, records):
        for record in records:
            assert catalog.find_by_url(record.city_slug, record.service_slug) == record

    def test_lookup_normalizes_inputs(self, catalog):
        record = catalog.find_by_url("Sandy-UT", "Laminate_Installation")
        assert record is not None
        assert record.url_path == "/sandy-ut/laminate-installation/"

    def test_miss(self, catalog):
        assert catalog.find_by_url("sandy-ut", "roofing") is None
        assert catalog.find_by_url("nowhere-ut", "laminate-installation") is None


class TestFindByAlias:
    def test_variation_finds_canonical(self, catalog):
        record = catalog.find_by_alias("sandy-ut", "laminate-flooring")
        assert record.service_slug == "laminate-installation"

    def test_canonical_finds_variation(self, catalog, make_record):
        catalog = ServiceCatalog([make_record("sandy-ut", "junk-hauling", "Junk Hauling", "Junk Removal")])
        record = catalog.find_by_alias("sandy-ut", "junk-removal")
        assert record.service_slug == "junk-hauling"

    def test_sibling_variations(self, catalog):
        record = catalog.find_by_alias("draper-ut", "kitchen-renovation")
        assert record.service_slug == "kitchen-remodeling"

    def test_unknown_alias(self, catalog):
        assert catalog.find_by_alias("sandy-ut", "kichen-remodel") is None

    def test_alias_respects_city(self, catalog):
        assert catalog.find_by_alias("murray-ut", "kitchen-remodel") is None


class TestIndices:
    def test_get_by_category(self, catalog):
        paths = [record.url_path for record in catalog.get_by_category("Remodeling")]
        assert paths == [
            "/sandy-ut/kitchen-remodeling/",
            "/draper-ut/kitchen-remodeling/",
            "/salt-lake-city-ut/kitchen-remodeling/",
            "/salt-lake-city-ut/bathroom-remodeling/",
        ]

    def test_category_is_normalized(self, catalog):
        assert len(catalog.get_by_category("junk-removal")) == 1

    def test_cities_for_service_in_catalog_order(self, catalog):
        assert catalog.get_cities_for_service("Laminate Installation") == ("Sandy", "Draper", "Murray")

    def test_cities_for_unknown_service(self, catalog):
        assert catalog.get_cities_for_service("Roofing") == ()

    def test_services_for_city(self, catalog):
        assert catalog.valid_service_slugs_for_city("draper-ut") == [
            "laminate-installation",
            "kitchen-remodeling",
            "junk-removal",
        ]
        assert catalog.services_for_city("nowhere-ut") == []

    def test_has_city(self, catalog):
        assert catalog.has_city("Murray-UT")
        assert not catalog.has_city("ogden-ut")

    def test_unique_values(self, catalog):
        assert catalog.unique_cities() == ["Sandy", "Draper", "Murray", "Salt Lake City"]
        assert catalog.unique_categories() == ["Flooring", "Remodeling", "Demolition", "Junk Removal"]

    def test_distinct_services_keep_first_record(self, catalog):
        services = catalog.distinct_services()
        assert [record.service_slug for record in services] == [
            "laminate-installation",
            "hardwood-floor-installation",
            "vinyl-plank-installation",
            "kitchen-remodeling",
            "interior-demolition",
            "junk-removal",
            "bathroom-remodeling",
        ]
        assert services[0].city_slug == "sandy-ut"

    def test_rebuild_is_identical(self, records):
        first = ServiceCatalog(records)
        second = ServiceCatalog(records)
        assert first.records == second.records
        assert first.get_by_category("Flooring") == second.get_by_category("Flooring")
        assert first.get_cities_for_service("Kitchen Remodeling") == second.get_cities_for_service(
            "Kitchen Remodeling"
        )

    def test_source_list_untouched(self, records):
        snapshot = list(records)
        ServiceCatalog(records)
        assert records == snapshot


class TestDuplicates:
    def test_first_record_wins(self, make_record):
        first = make_record("sandy-ut", "laminate-installation", "Laminate Installation", "Flooring")
        second = make_record(
            "sandy-ut", "laminate-installation", "Laminate Installation", "Flooring", h1="Second"
        )
        catalog = ServiceCatalog([first, second])
        assert len(catalog) == 1
        assert catalog.find_by_url("sandy-ut", "laminate-installation").h1 == first.h1

    def test_duplicates_are_reported(self, make_record):
        record = make_record("sandy-ut", "laminate-installation", "Laminate Installation", "Flooring")
        report = ServiceCatalog([record, record, record]).validate_integrity()
        assert not report.is_valid
        assert "Duplicate URL path found: /sandy-ut/laminate-installation/ (3 occurrences)" in report.issues


class TestSearchAndReports:
    def test_search(self, catalog):
        paths = [record.url_path for record in catalog.search("murray")]
        assert paths == ["/murray-ut/laminate-installation/", "/murray-ut/hardwood-floor-installation/"]

    def test_blank_search(self, catalog):
        assert catalog.search("") == []

    def test_stats(self, catalog):
        stats = catalog.stats()
        assert stats.total_services == 12
        assert stats.total_cities == 4
        assert stats.total_categories == 4
        assert stats.services_per_city[0].name == "Sandy"
        assert stats.services_per_city[0].count == 5
        assert stats.services_per_category[0].name == "Flooring"
        assert stats.services_per_category[0].count == 6

    def test_clean_catalog_is_valid(self, catalog):
        report = catalog.validate_integrity()
        assert report.is_valid
        assert report.issues == []

    def test_integrity_issues(self, make_record):
        bad = make_record(
            "sandy-ut",
            "tile-installation",
            "Tile Installation",
            "Flooring",
            seo_title="",
            url_path="sandy-ut/tile-installation/",
            json_ld="{broken",
        )
        report = ServiceCatalog([bad]).validate_integrity()
        assert "Record 1: Missing or empty seo_title" in report.issues
        assert "Record 1: URL path should start with '/': sandy-ut/tile-installation/" in report.issues
        assert "Record 1: Invalid JSON-LD for Sandy - Tile Installation" in report.issues

    def test_empty_catalog(self):
        catalog = ServiceCatalog([])
        assert len(catalog) == 0
        assert catalog.stats().total_services == 0
        assert catalog.validate_integrity().is_valid
