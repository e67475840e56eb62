"""Tests for ``tech_radar.core.store`` — the in-memory radar repository."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from tech_radar.core.models import (
    ProjectInput,
    QuadrantInput,
    RingInput,
    TechnologyInput,
    TechnologyProjectInput,
)


def _tech(name="Tech", description="A technology", quadrant=0, ring=0, **kw) -> TechnologyInput:
    return TechnologyInput(name=name, description=description, quadrant=quadrant, ring=ring, **kw)


def _project(name="Project", status="active", **kw) -> ProjectInput:
    return ProjectInput(name=name, description=f"{name} description", status=status, **kw)


def _names(technologies) -> list[str]:
    return [t.name for t in technologies]


# ── Create / get / list ──────────────────────────────────────────────────


class TestCreateAndGet:
    def test_get_after_create_returns_equal_entity(self, store):
        created = [
            store.create_quadrant(QuadrantInput(name="Tools", description="d")),
            store.create_ring(RingInput(name="Adopt", description="d", color="#5ba300")),
            store.create_technology(_tech(tags=["a"], custom_properties={"k": 1})),
            store.create_project(_project()),
            store.link_technology_to_project(TechnologyProjectInput(technology_id=1, project_id=1)),
        ]
        getters = [store.get_quadrant, store.get_ring, store.get_technology, store.get_project, store.get_link]
        for entity, get in zip(created, getters, strict=True):
            assert get(entity.id) == entity

    def test_list_length_matches_creates(self, store):
        for i in range(3):
            store.create_quadrant(QuadrantInput(name=f"Q{i}", description="d"))
        for i in range(2):
            store.create_ring(RingInput(name=f"R{i}", description="d"))
        for i in range(5):
            store.create_technology(_tech(name=f"T{i}"))
        for i in range(4):
            store.create_project(_project(name=f"P{i}"))
        for i in range(6):
            store.link_technology_to_project(TechnologyProjectInput(technology_id=1, project_id=1))

        assert len(store.list_quadrants()) == 3
        assert len(store.list_rings()) == 2
        assert len(store.list_technologies()) == 5
        assert len(store.list_projects()) == 4
        assert len(store.list_links()) == 6
        assert store.counts() == {"quadrants": 3, "rings": 2, "technologies": 5, "projects": 4, "links": 6}

    def test_list_is_in_creation_order(self, store):
        for name in ["b", "a", "c"]:
            store.create_technology(_tech(name=name))
        assert _names(store.list_technologies()) == ["b", "a", "c"]

    def test_get_missing_returns_none(self, store):
        assert store.get_technology(1) is None
        assert store.get_quadrant(42) is None
        assert store.get_link(0) is None

    def test_kubernetes_defaults(self, axes_store):
        created = axes_store.create_technology(
            TechnologyInput(name="Kubernetes", description="Orchestration", quadrant=2, ring=0)
        )
        fetched = axes_store.get_technology(created.id)
        assert fetched.quadrant == 2
        assert fetched.ring == 0
        assert fetched.tags == []
        assert fetched.website is None
        assert fetched.custom_properties is None

    def test_positions_are_not_validated(self, axes_store):
        tech = axes_store.create_technology(_tech(quadrant=99, ring=-1))
        assert (tech.quadrant, tech.ring) == (99, -1)

    def test_tags_are_copied_on_create(self, store):
        tags = ["one"]
        tech = store.create_technology(_tech(tags=tags))
        tags.append("two")
        assert store.get_technology(tech.id).tags == ["one"]


# ── Ids ──────────────────────────────────────────────────────────────────


class TestIds:
    def test_ids_start_at_one_and_increase(self, store):
        ids = [store.create_technology(_tech(name=f"T{i}")).id for i in range(3)]
        assert ids == [1, 2, 3]

    def test_collections_have_independent_counters(self, store):
        store.create_technology(_tech())
        store.create_technology(_tech())
        assert store.create_project(_project()).id == 1

    def test_deleted_ids_are_not_reused(self, store):
        first, middle, last = (store.create_technology(_tech(name=n)) for n in "abc")
        store.delete_technology(middle.id)
        fresh = store.create_technology(_tech(name="d"))
        assert fresh.id == 4
        assert first.id < last.id < fresh.id
        assert store.get_technology(middle.id) is None

    def test_concurrent_creates_get_unique_ids(self, store):
        def create(n):
            return store.create_technology(_tech(name=f"T{n}")).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(create, range(200)))

        assert sorted(ids) == list(range(1, 201))
        assert len(store.list_technologies()) == 200


# ── Search / filter ──────────────────────────────────────────────────────


class TestSearch:
    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_returns_everything_in_order(self, seeded_store, query):
        assert seeded_store.search_technologies(query) == seeded_store.list_technologies()

    def test_docker_matches_docker_and_compose(self, seeded_store):
        assert set(_names(seeded_store.search_technologies("docker"))) == {"Docker", "Docker Compose"}

    def test_search_is_case_insensitive(self, seeded_store):
        assert seeded_store.search_technologies("DoCkEr") == seeded_store.search_technologies("docker")

    def test_search_matches_tags(self, seeded_store):
        assert _names(seeded_store.search_technologies("javascript")) == ["React", "TypeScript", "Svelte"]

    def test_search_matches_description(self, seeded_store):
        assert _names(seeded_store.search_technologies("event streaming")) == ["Apache Kafka"]

    @pytest.mark.parametrize("query", ["docker", "API", "front", "ci", "zzz-nothing"])
    def test_results_are_an_ordered_subset_of_list(self, seeded_store, query):
        everything = seeded_store.list_technologies()
        results = seeded_store.search_technologies(query)
        needle = query.lower()

        assert results == [t for t in everything if t in results]
        for t in results:
            assert (
                needle in t.name.lower()
                or needle in t.description.lower()
                or any(needle in tag.lower() for tag in t.tags)
            )

    def test_search_survives_cleared_fields(self, store):
        tech = store.create_technology(_tech(name="Widget", tags=["x"]))
        store.update_technology(tech.id, {"description": None, "tags": None})
        assert store.search_technologies("widget") == [store.get_technology(tech.id)]
        assert store.search_technologies("x") == []

    def test_filter_by_quadrant_and_ring(self, seeded_store):
        assert _names(seeded_store.filter_technologies(quadrant=2, ring=0)) == ["React", "TypeScript"]

    def test_filter_combines_with_query(self, seeded_store):
        assert _names(seeded_store.filter_technologies("containers", quadrant=3)) == ["Docker", "Kubernetes"]


# ── Update ───────────────────────────────────────────────────────────────


class TestUpdate:
    def test_update_changes_only_given_fields(self, seeded_store):
        before = seeded_store.get_technology(3)
        after = seeded_store.update_technology(3, {"name": "K8s"})

        assert after.name == "K8s"
        for field in ("description", "quadrant", "ring", "website", "tags", "custom_properties"):
            assert getattr(after, field) == getattr(before, field)
        assert seeded_store.get_technology(3) == after

    def test_update_missing_returns_none_and_leaves_state(self, seeded_store):
        snapshot = seeded_store.list_technologies()
        assert seeded_store.update_technology(999, {"name": "X"}) is None
        assert seeded_store.list_technologies() == snapshot

    def test_explicit_none_clears_optional_field(self, seeded_store):
        assert seeded_store.update_technology(1, {"website": None}).website is None

    def test_id_and_unknown_keys_are_ignored(self, store):
        tech = store.create_technology(_tech())
        updated = store.update_technology(tech.id, {"id": 77, "bogus": True, "ring": 2})
        assert updated.id == tech.id
        assert updated.ring == 2
        assert store.get_technology(77) is None

    def test_update_quadrant_ring_project_and_link(self, seeded_store):
        assert seeded_store.update_quadrant(1, {"color": "#000"}).color == "#000"
        assert seeded_store.update_ring(4, {"name": "Avoid"}).name == "Avoid"
        assert seeded_store.update_project(3, {"status": "active"}).status == "active"
        assert seeded_store.update_link(1, {"notes": "n"}).notes == "n"
        assert seeded_store.update_ring(99, {"name": "x"}) is None


# ── Axis resolution ──────────────────────────────────────────────────────


class TestPositions:
    def test_quadrant_and_ring_at(self, axes_store):
        assert axes_store.quadrant_at(2).name == "Frameworks"
        assert axes_store.ring_at(0).name == "Adopt"

    @pytest.mark.parametrize("position", [-1, 4, 100])
    def test_out_of_range_positions(self, axes_store, position):
        assert axes_store.quadrant_at(position) is None
        assert axes_store.ring_at(position) is None


# ── Links and deletes ────────────────────────────────────────────────────


class TestLinks:
    def test_projects_for_technology(self, seeded_store):
        postgres = next(t for t in seeded_store.list_technologies() if t.name == "PostgreSQL")
        assert [p.name for p in seeded_store.projects_for_technology(postgres.id)] == [
            "Payments Platform",
            "Legacy Billing",
        ]

    def test_technologies_for_project(self, seeded_store):
        assert _names(seeded_store.technologies_for_project(1)) == [
            "React",
            "TypeScript",
            "FastAPI",
            "Docker Compose",
        ]

    def test_duplicate_links_are_kept_but_projects_deduplicated(self, store):
        tech = store.create_technology(_tech())
        project = store.create_project(_project())
        store.link_technology_to_project(TechnologyProjectInput(tech.id, project.id))
        store.link_technology_to_project(TechnologyProjectInput(tech.id, project.id))

        assert len(store.links_for_technology(tech.id)) == 2
        assert store.projects_for_technology(tech.id) == [project]

    def test_dangling_links_are_accepted_and_skipped(self, store):
        link = store.link_technology_to_project(TechnologyProjectInput(technology_id=5, project_id=9))
        assert store.get_link(link.id) == link
        assert store.projects_for_technology(5) == []
        assert store.links_for_project(9) == [link]


class TestDelete:
    def test_delete_technology_cascades_links(self, seeded_store):
        postgres_id = 12
        assert len(seeded_store.links_for_technology(postgres_id)) == 2
        removed = seeded_store.delete_technology(postgres_id)

        assert removed.name == "PostgreSQL"
        assert seeded_store.links_for_technology(postgres_id) == []
        assert seeded_store.counts()["links"] == 9

    def test_delete_project_cascades_links(self, seeded_store):
        seeded_store.delete_project(1)
        assert seeded_store.links_for_project(1) == []
        assert seeded_store.counts() == {
            "quadrants": 4,
            "rings": 4,
            "technologies": 17,
            "projects": 3,
            "links": 7,
        }

    def test_delete_link(self, seeded_store):
        assert seeded_store.delete_link(1).technology_id == 7
        assert seeded_store.get_link(1) is None

    def test_delete_missing_returns_none(self, store):
        assert store.delete_technology(1) is None
        assert store.delete_project(1) is None
        assert store.delete_link(1) is None
