# ============================================================================
# PROPERTY RESOLUTION TESTS
# ============================================================================
# EPOCH: 1 - DEPLOYMENT PLANNING
# STATUS: Tests - Job property filtering
# PURPOSE: Verify the unschemed / schemed / conflicting property policy
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Property Resolution Tests

Tests:
1. Dotted path lookup and copy helpers
2. Style classification over a template set
3. Job.bind_properties() for each style
4. Precondition: no templates, no properties

Run with:
    pytest tests/test_properties.py -v
"""

import pytest

from core.contracts import PropertySchemaStyle
from core.errors import DirectorError, JobIncompatibleSpecs
from core.models import Job, ReleaseVersion, Template, TemplateModel
from planner.properties import (
    classify_property_style,
    copy_property,
    extract_template_properties,
    lookup_property,
)


# ============================================================================
# HELPERS
# ============================================================================

RELEASE = ReleaseVersion(name="appcloud", version="42")


def _template(name, properties=None):
    model = TemplateModel(
        name=name,
        version="1",
        sha1="sha",
        blobstore_id="blob",
        properties=properties,
    )
    return Template(name=name, release=RELEASE).bind_model(model)


def _job(all_properties, *templates):
    job = Job(name="cloud_controller", all_properties=all_properties)
    job.templates.extend(templates)
    return job


ALL_PROPERTIES = {
    "cc": {"port": 9022, "token": "secret"},
    "nats": {"address": "10.0.0.5", "port": 4222},
    "domain": "example.com",
}


# ============================================================================
# DOTTED PATH HELPERS
# ============================================================================

class TestLookupProperty:
    def test_top_level(self):
        assert lookup_property(ALL_PROPERTIES, "domain") == "example.com"

    def test_nested(self):
        assert lookup_property(ALL_PROPERTIES, "nats.port") == 4222

    def test_missing(self):
        assert lookup_property(ALL_PROPERTIES, "nats.user") is None
        assert lookup_property(ALL_PROPERTIES, "uaa.url") is None

    def test_through_scalar(self):
        assert lookup_property(ALL_PROPERTIES, "domain.name") is None

    def test_none_collection(self):
        assert lookup_property(None, "cc.port") is None


class TestCopyProperty:
    def test_copies_nested_value(self):
        dst = {}
        copy_property(dst, ALL_PROPERTIES, "nats.port")
        assert dst == {"nats": {"port": 4222}}

    def test_uses_default_when_missing(self):
        dst = {}
        copy_property(dst, ALL_PROPERTIES, "uaa.url", "https://uaa")
        assert dst == {"uaa": {"url": "https://uaa"}}

    def test_merges_into_existing_branch(self):
        dst = {"nats": {"address": "10.0.0.5"}}
        copy_property(dst, ALL_PROPERTIES, "nats.port")
        assert dst == {"nats": {"address": "10.0.0.5", "port": 4222}}

    def test_falsy_values_are_copied(self):
        dst = {}
        copy_property(dst, {"ssl": {"enabled": False}}, "ssl.enabled", True)
        assert dst == {"ssl": {"enabled": False}}

    def test_source_not_shared(self):
        src = {"cc": {"buckets": ["a", "b"]}}
        dst = {}
        copy_property(dst, src, "cc.buckets")
        dst["cc"]["buckets"].append("c")
        assert src["cc"]["buckets"] == ["a", "b"]


# ============================================================================
# STYLE CLASSIFICATION
# ============================================================================

class TestClassifyPropertyStyle:
    def test_unschemed(self):
        templates = [_template("a"), _template("b")]
        assert classify_property_style(templates) is PropertySchemaStyle.UNSCHEMED

    def test_schemed(self):
        templates = [_template("a", {"x": {}}), _template("b", {"y": {}})]
        assert classify_property_style(templates) is PropertySchemaStyle.SCHEMED

    def test_conflicting(self):
        templates = [_template("a", {"x": {}}), _template("b")]
        assert classify_property_style(templates) is PropertySchemaStyle.CONFLICTING

    def test_empty_definitions_count_as_declared(self):
        templates = [_template("a", {}), _template("b", {"y": {}})]
        assert classify_property_style(templates) is PropertySchemaStyle.SCHEMED


# ============================================================================
# BIND PROPERTIES
# ============================================================================

class TestBindProperties:
    def test_unschemed_passes_everything_through(self):
        job = _job(ALL_PROPERTIES, _template("cloud_controller_ng"))

        job.bind_properties()

        assert job.properties == ALL_PROPERTIES

    def test_schemed_extracts_declared_properties(self):
        job = _job(
            ALL_PROPERTIES,
            _template("cloud_controller_ng", {
                "cc.port": {"default": 8080},
                "nats.address": {},
            }),
        )

        job.bind_properties()

        assert job.properties == {
            "cc": {"port": 9022},
            "nats": {"address": "10.0.0.5"},
        }

    def test_defaults_fill_missing_properties(self):
        job = _job(
            ALL_PROPERTIES,
            _template("cloud_controller_ng", {
                "cc.max_upload_size": {"default": 1024},
                "uaa.url": {"description": "no default"},
            }),
        )

        job.bind_properties()

        assert job.properties == {
            "cc": {"max_upload_size": 1024},
            "uaa": {"url": None},
        }

    def test_later_template_wins(self):
        job = _job(
            {},
            _template("first", {"a.b": {"default": 1}}),
            _template("second", {"a.b": {"default": 2}}),
        )

        job.bind_properties()

        assert job.properties == {"a": {"b": 2}}

    def test_manifest_value_beats_defaults(self):
        job = _job(
            {"a": {"b": 5}},
            _template("first", {"a.b": {"default": 1}}),
            _template("second", {"a.b": {"default": 2}}),
        )

        job.bind_properties()

        assert job.properties == {"a": {"b": 5}}

    def test_conflicting_styles_raise(self):
        job = _job(
            ALL_PROPERTIES,
            _template("cloud_controller_ng", {"cc.port": {}}),
            _template("metron_agent"),
        )

        with pytest.raises(JobIncompatibleSpecs, match="cloud_controller"):
            job.bind_properties()

    def test_no_templates_raises(self):
        job = _job(ALL_PROPERTIES)

        with pytest.raises(DirectorError, match="before parsing job templates"):
            job.bind_properties()
        assert job.properties is None

    def test_filter_properties_no_templates_raises(self):
        with pytest.raises(DirectorError):
            _job(ALL_PROPERTIES).filter_properties(ALL_PROPERTIES)

    def test_returns_bound_properties(self):
        job = _job(ALL_PROPERTIES, _template("cloud_controller_ng", {"domain": {}}))

        assert job.bind_properties() == {"domain": "example.com"}

    def test_unschemed_without_all_properties(self):
        job = _job(None, _template("cloud_controller_ng"))

        assert job.bind_properties() is None


class TestExtractTemplateProperties:
    def test_none_definition_is_tolerated(self):
        templates = [_template("a", {"domain": None})]
        assert extract_template_properties(templates, ALL_PROPERTIES) == {"domain": "example.com"}

    def test_custom_separator(self):
        templates = [_template("a", {"nats/port": {}})]
        result = extract_template_properties(templates, ALL_PROPERTIES, separator="/")
        assert result == {"nats": {"port": 4222}}
