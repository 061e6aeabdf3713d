"""Tests for component selection and view building."""

from datetime import date

from lifecycle_timeline.models import ComponentRecord, SegmentKind, SupportStatus, ViewState
from lifecycle_timeline.view import (
    build_view,
    components_for_site,
    default_section,
    flatten_all_components,
    select_components,
    site_summary,
)

NOW = date(2025, 6, 1)


def _ids(components):
    return [c.id for c in components]


class TestSelection:
    def test_flatten_tags_sections(self, catalog):
        flattened = flatten_all_components(catalog)
        assert _ids(flattened) == ["fw-1", "sw-1", "st-1", "hv-1", "ap-1"]
        assert flattened[-1].section == "siteInfrastructure"

    def test_all_sites_is_whole_catalog(self, catalog, site_mapping):
        assert len(components_for_site("all", catalog, site_mapping)) == 5

    def test_site_keeps_catalog_order(self, catalog, site_mapping):
        assert _ids(components_for_site("London", catalog, site_mapping)) == ["fw-1", "st-1", "ap-1"]

    def test_unknown_site_is_empty(self, catalog, site_mapping):
        assert components_for_site("Berlin", catalog, site_mapping) == []

    def test_select_section_and_site(self, catalog, site_mapping):
        state = ViewState(section="sharedInfrastructure", site="London")
        assert _ids(select_components(catalog, site_mapping, state)) == ["fw-1", "st-1"]

    def test_select_without_site_mapping(self, catalog):
        state = ViewState(section="sharedInfrastructure", site="London")
        assert select_components(catalog, {}, state) == []
        assert len(select_components(catalog, {}, ViewState(section="sharedInfrastructure"))) == 4

    def test_unknown_section_is_empty(self, catalog, site_mapping):
        assert select_components(catalog, site_mapping, ViewState(section="nope")) == []


class TestBuildView:
    def test_counts_and_groups(self, catalog, site_mapping, window):
        view = build_view(catalog, site_mapping, ViewState(section="sharedInfrastructure"), window, NOW)

        assert view.counts.as_dict() == {"all": 4, "supported": 2, "extended": 1, "unsupported": 1}
        assert [g.label for g in view.groups] == ["Network", "Storage", "Compute"]
        assert [r.component.id for r in view.groups[0].rows] == ["fw-1", "sw-1"]
        assert view.row_count == 4
        assert not view.is_empty

    def test_filter_limits_rows_not_counters(self, catalog, site_mapping, window):
        state = ViewState(section="sharedInfrastructure", filter="extended")
        view = build_view(catalog, site_mapping, state, window, NOW)

        assert view.counts.all == 4
        assert view.row_count == 1
        row = view.groups[0].rows[0]
        assert row.component.id == "sw-1"
        assert row.status == SupportStatus.EXTENDED
        assert [s.kind for s in row.segments] == [SegmentKind.EXTENDED, SegmentKind.EXPIRED]

    def test_empty_selection(self, catalog, site_mapping, window):
        view = build_view(catalog, site_mapping, ViewState(section="sharedInfrastructure", site="Berlin"), window, NOW)
        assert view.is_empty
        assert view.groups == ()
        assert view.counts.as_dict() == {"all": 0, "supported": 0, "extended": 0, "unsupported": 0}

    def test_filter_with_no_matches_is_not_empty(self, catalog, site_mapping, window):
        state = ViewState(section="siteInfrastructure", filter="unsupported")
        view = build_view(catalog, site_mapping, state, window, NOW)
        assert not view.is_empty
        assert view.row_count == 0

    def test_malformed_extended_row_matches_its_bar(self, window):
        record = ComponentRecord.from_dict(
            {
                "id": "lb-1",
                "component": "Load Balancer",
                "endOfStandardSupport": "2020-01-01",
                "endOfExtendedSupport": "TBD",
            },
            section="lab",
        )
        catalog = {"lab": [record]}

        supported = build_view(catalog, {}, ViewState(section="lab", filter="supported"), window, NOW)
        unsupported = build_view(catalog, {}, ViewState(section="lab", filter="unsupported"), window, NOW)

        assert supported.counts.as_dict() == {"all": 1, "supported": 1, "extended": 0, "unsupported": 0}
        assert unsupported.row_count == 0
        row = supported.groups[0].rows[0]
        assert row.status == SupportStatus.SUPPORTED
        assert [(s.kind, s.width_percent) for s in row.segments] == [(SegmentKind.STANDARD, 100)]

    def test_now_is_fixed_for_the_pass(self, catalog, site_mapping, window):
        view = build_view(catalog, site_mapping, ViewState(section="sharedInfrastructure"), window, NOW)
        assert view.now == NOW

    def test_default_window(self, catalog, site_mapping):
        view = build_view(catalog, site_mapping, ViewState(section="sharedInfrastructure"), now=NOW)
        assert view.window.total_days == 2555


class TestHelpers:
    def test_default_section_prefers_shared_infrastructure(self, catalog):
        assert default_section(catalog) == "sharedInfrastructure"
        assert default_section({"b": [], "a": []}) == "b"
        assert default_section({}) is None

    def test_site_summary(self, catalog, site_mapping):
        assert site_summary(catalog, site_mapping) == {
            "London": {"sharedInfrastructure": 2, "siteInfrastructure": 1},
            "Paris": {"sharedInfrastructure": 1},
        }
