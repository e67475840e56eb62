"""Tests for ``tech_radar.core.seed`` — seed schema, YAML loading and store seeding."""

from __future__ import annotations

import pydantic
import pytest

from tech_radar.core.errors import ErrorCategory, SeedDataError
from tech_radar.core.seed import (
    DEFAULT_LINKS,
    DEFAULT_PROJECTS,
    DEFAULT_TECHNOLOGIES,
    LinkSeed,
    ProjectSeed,
    SeedData,
    TechnologySeed,
    default_seed_data,
    load_seed,
    seed_store,
)
from tech_radar.core.store import RadarStore


class TestDefaultSeed:
    def test_counts(self, seeded_store):
        assert seeded_store.counts() == {
            "quadrants": 4,
            "rings": 4,
            "technologies": len(DEFAULT_TECHNOLOGIES),
            "projects": len(DEFAULT_PROJECTS),
            "links": len(DEFAULT_LINKS),
        }

    def test_axes_order(self, seeded_store):
        assert [q.name for q in seeded_store.list_quadrants()] == ["Techniques", "Tools", "Frameworks", "Platforms"]
        assert [r.name for r in seeded_store.list_rings()] == ["Adopt", "Trial", "Assess", "Hold"]

    def test_every_link_points_at_a_seeded_entity(self, seeded_store):
        for link in seeded_store.list_links():
            assert seeded_store.get_technology(link.technology_id) is not None
            assert seeded_store.get_project(link.project_id) is not None

    def test_links_resolve_by_name(self, seeded_store):
        names = {t.id: t.name for t in seeded_store.list_technologies()}
        projects = {p.id: p.name for p in seeded_store.list_projects()}
        pairs = [(names[link.technology_id], projects[link.project_id]) for link in seeded_store.list_links()]
        assert pairs == [(t, p) for t, p, _ in DEFAULT_LINKS]

    def test_kubernetes_carries_custom_properties(self, seeded_store):
        kubernetes = seeded_store.get_technology(3)
        assert kubernetes.name == "Kubernetes"
        assert kubernetes.custom_properties == {"owner": "platform-team", "license": "Apache-2.0"}

    def test_load_seed_without_file_is_default(self):
        assert load_seed() == default_seed_data()

    def test_with_defaults_builds_a_fresh_store(self):
        a = RadarStore.with_defaults()
        b = RadarStore.with_defaults()
        a.delete_technology(1)
        assert b.get_technology(1) is not None


class TestSeedSchema:
    def test_unknown_link_technology_is_rejected(self):
        with pytest.raises(pydantic.ValidationError, match="unknown technology"):
            SeedData(
                projects=[ProjectSeed(name="P")],
                links=[LinkSeed(technology="Nope", project="P")],
            )

    def test_unknown_quadrant_name_is_rejected(self):
        with pytest.raises(pydantic.ValidationError, match="unknown quadrant"):
            SeedData(technologies=[TechnologySeed(name="T", quadrant="Nowhere", ring=0)])

    def test_numeric_positions_are_not_checked(self):
        data = SeedData(technologies=[TechnologySeed(name="T", quadrant=7, ring=9)])
        store = RadarStore(data)
        assert (store.get_technology(1).quadrant, store.get_technology(1).ring) == (7, 9)

    def test_project_status_defaults_to_active(self):
        assert ProjectSeed(name="P").status == "active"


class TestYaml:
    def test_from_yaml_file(self, seed_file):
        data = SeedData.from_yaml_file(seed_file)
        assert [t.name for t in data.technologies] == ["Docker", "Jenkins"]

    def test_names_resolve_to_positions(self, seed_file):
        store = RadarStore(SeedData.from_yaml_file(seed_file))
        docker, jenkins = store.list_technologies()

        assert (docker.quadrant, docker.ring) == (1, 0)
        assert (jenkins.quadrant, jenkins.ring) == (0, 1)
        assert store.projects_for_technology(docker.id)[0].name == "Radar Portal"
        assert store.get_link(1).notes == "Dev containers"

    def test_empty_document_is_empty_seed(self):
        assert SeedData.from_yaml("") == SeedData()

    def test_invalid_yaml(self):
        with pytest.raises(SeedDataError, match="Invalid YAML"):
            SeedData.from_yaml("quadrants: [unclosed")

    def test_top_level_must_be_mapping(self):
        with pytest.raises(SeedDataError, match="Expected a mapping"):
            SeedData.from_yaml("- just\n- a list\n")

    def test_schema_errors_are_wrapped(self):
        with pytest.raises(SeedDataError) as exc_info:
            SeedData.from_yaml("links:\n  - {technology: Ghost, project: Nowhere}\n")
        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert isinstance(exc_info.value.cause, pydantic.ValidationError)

    def test_unquoted_date_in_custom_properties_is_rejected(self):
        text = (
            "technologies:\n"
            "  - name: Docker\n"
            "    quadrant: 0\n"
            "    ring: 0\n"
            "    custom_properties: {adopted_on: 2024-01-15}\n"
        )
        with pytest.raises(SeedDataError, match="custom_properties"):
            SeedData.from_yaml(text)

    def test_quoted_date_in_custom_properties_is_kept(self):
        text = (
            "technologies:\n"
            "  - name: Docker\n"
            "    quadrant: 0\n"
            "    ring: 0\n"
            "    custom_properties: {adopted_on: '2024-01-15', scores: [1, 2.5], internal: true}\n"
        )
        data = SeedData.from_yaml(text)
        assert data.technologies[0].custom_properties == {
            "adopted_on": "2024-01-15",
            "scores": [1, 2.5],
            "internal": True,
        }

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedDataError, match="not found") as exc_info:
            SeedData.from_yaml_file(tmp_path / "missing.yaml")
        assert exc_info.value.field == "seed_file"

    def test_file_errors_carry_path(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("rings: {not: a list}\n", encoding="utf-8")
        with pytest.raises(SeedDataError) as exc_info:
            SeedData.from_yaml_file(path)
        assert exc_info.value.context["path"] == str(path)


class TestSeedStore:
    def test_returns_counts(self, seed_file):
        counts = seed_store(RadarStore(), SeedData.from_yaml_file(seed_file))
        assert counts == {"quadrants": 2, "rings": 2, "technologies": 2, "projects": 1, "links": 1}

    def test_links_created_after_projects(self, store):
        data = SeedData(
            technologies=[TechnologySeed(name="T", quadrant=0, ring=0)],
            projects=[ProjectSeed(name=f"P{i}") for i in range(5)],
            links=[LinkSeed(technology="T", project="P4")],
        )
        seed_store(store, data)
        link = store.list_links()[0]
        assert store.get_project(link.project_id).name == "P4"

    def test_seeding_onto_existing_store_uses_fresh_ids(self, seeded_store, seed_file):
        seed_store(seeded_store, SeedData.from_yaml_file(seed_file))
        docker_again = seeded_store.list_technologies()[-2]
        link = seeded_store.list_links()[-1]
        assert docker_again.name == "Docker"
        assert link.technology_id == docker_again.id
