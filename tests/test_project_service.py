"""Tests unitaires pour ProjectService (créations, mises à jour, suppressions)."""

import threading
import time
from datetime import datetime, timezone

import pytest

from domain.entities import PublishedStatus, SectionDisplay, User
from domain.exceptions import OwnershipViolationError, ProjectNotFoundError


def test_create_project_with_tags(project_service, make_project, owner):
    created = project_service.create_project(make_project(), ["Website", "UI/UX"])

    assert created.project.id == 1
    assert created.project.published_status == PublishedStatus.DRAFT
    assert created.project.section_display == SectionDisplay.GENERAL
    assert created.user.name == owner.name
    # Tags existants réutilisés (seed), pas recréés
    assert [(t.id, t.name) for t in created.tags] == [(1, "Website"), (4, "UI/UX")]

    fetched = project_service.get_project(created.project.id)
    assert fetched.tag_names() == ["Website", "UI/UX"]


def test_create_project_creates_missing_tags(project_service, tag_service, make_project):
    created = project_service.create_project(make_project(), ["Motion Design"])

    assert created.tag_names() == ["Motion Design"]
    assert tag_service.get_tag_by_name("motion design").id == created.tags[0].id


def test_create_project_dedupes_requested_tags(project_service, tag_repo, make_project):
    created = project_service.create_project(
        make_project(), ["UI/UX", "ui/ux", "  Branding ", "", "BRANDING"]
    )

    assert created.tag_names() == ["UI/UX", "Branding"]
    assert len(tag_repo.find_project_tags(created.project.id)) == 2


def test_tag_reused_across_projects_regardless_of_case(project_service, tag_service, make_project):
    first = project_service.create_project(make_project(title="A"), ["Illustration"])
    second = project_service.create_project(make_project(title="B"), ["illustration"])

    matching = [t for t in tag_service.get_all_tags() if t.matches("illustration")]
    assert len(matching) == 1
    assert first.tags[0].id == second.tags[0].id == matching[0].id
    # La première forme rencontrée est conservée
    assert second.tags[0].name == "Illustration"


def test_concurrent_tag_creation_yields_a_single_tag(tag_service, tag_repo, monkeypatch):
    lookup = tag_repo.find_by_name

    def slow_lookup(name):
        tag = lookup(name)
        # Élargit la fenêtre entre la recherche et la création
        time.sleep(0.05)
        return tag

    monkeypatch.setattr(tag_repo, "find_by_name", slow_lookup)
    start = threading.Barrier(2)
    results = []

    def worker():
        start.wait()
        results.append(tag_service.get_or_create("Illustration"))

    threads = [threading.Thread(target=worker) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 2
    assert results[0].id == results[1].id
    assert len([t for t in tag_repo.find_all() if t.matches("illustration")]) == 1


def test_get_all_projects_contains_created_project(project_service, make_project):
    created = project_service.create_project(make_project(), ["Website", "UI/UX"])

    projects = project_service.get_all_projects()

    assert [p.project.id for p in projects] == [created.project.id]
    assert len(projects[0].tags) == 2


def test_update_replaces_tags_entirely(project_service, make_project):
    created = project_service.create_project(make_project(), ["Website", "UI/UX"])

    updated = project_service.update_project(created.project.id, {}, ["Branding"])

    assert updated.tag_names() == ["Branding"]
    assert project_service.get_project(created.project.id).tag_names() == ["Branding"]


def test_update_without_tag_list_keeps_tags(project_service, make_project):
    created = project_service.create_project(make_project(), ["Website"])

    updated = project_service.update_project(created.project.id, {"title": "Refonte 2.0"})

    assert updated.project.title == "Refonte 2.0"
    assert updated.tag_names() == ["Website"]


def test_update_with_empty_tag_list_removes_all_tags(project_service, make_project):
    created = project_service.create_project(make_project(), ["Website"])

    updated = project_service.update_project(created.project.id, {}, [])

    assert updated.tags == []


def test_update_ignores_protected_fields(project_service, user_repo, make_project):
    other = user_repo.create(User(username="intruder", hashed_password="h", name="X"))
    created = project_service.create_project(make_project())

    updated = project_service.update_project(created.project.id, {
        "id": 77,
        "created_at": datetime(1999, 1, 1, tzinfo=timezone.utc),
        "user_id": other.id,
        "category": "Mobile",
    })

    assert updated.project.id == created.project.id
    assert updated.project.created_at == created.project.created_at
    assert updated.project.user_id == created.project.user_id
    assert updated.project.category == "Mobile"


def test_update_unknown_project_raises(project_service):
    try:
        project_service.update_project(404, {"title": "x"})
        assert False, "update_project aurait dû lever ProjectNotFoundError"
    except ProjectNotFoundError as exc:
        assert "not found" in str(exc)


def test_update_status_only_touches_status(project_service, make_project):
    created = project_service.create_project(
        make_project(section_display="featured", gallery_images=["1.png", "2.png"]),
        ["Website", "Branding"]
    )

    published = project_service.update_status(created.project.id, "published")

    assert published.project.published_status == PublishedStatus.PUBLISHED
    assert published.project.title == created.project.title
    assert published.project.section_display == SectionDisplay.FEATURED
    assert published.project.gallery_images == ["1.png", "2.png"]
    assert published.project.created_at == created.project.created_at
    assert published.tag_names() == ["Website", "Branding"]


def test_any_status_transition_is_allowed(project_service, make_project):
    created = project_service.create_project(make_project())
    project_id = created.project.id

    for status in ("hidden", "published", "draft", "hidden", "draft"):
        result = project_service.update_status(project_id, status)
        assert result.project.published_status.value == status


def test_update_status_rejects_unknown_value(project_service, make_project):
    created = project_service.create_project(make_project())

    with pytest.raises(ValueError):
        project_service.update_status(created.project.id, "archived")


def test_update_status_unknown_project_raises(project_service):
    with pytest.raises(ProjectNotFoundError):
        project_service.update_status(9, PublishedStatus.HIDDEN)


def test_delete_cascades_tag_links_and_likes(project_service, tag_repo, like_repo, make_project):
    created = project_service.create_project(make_project(), ["Website", "3D Design"])
    project_id = created.project.id
    like_repo.add(project_id, "fpA")

    project_service.delete_project(project_id)

    assert project_service.get_project(project_id) is None
    assert tag_repo.find_project_tags(project_id) == []
    assert like_repo.count(project_id) == 0
    # Les tags eux-mêmes sont globaux et restent
    assert tag_repo.find_by_name("3D Design") is not None


def test_delete_unknown_project_raises(project_service):
    with pytest.raises(ProjectNotFoundError):
        project_service.delete_project(3)


def test_ids_are_never_reused_after_delete(project_service, make_project):
    first = project_service.create_project(make_project())
    project_service.delete_project(first.project.id)

    second = project_service.create_project(make_project())

    assert second.project.id == first.project.id + 1


def test_get_owned_project(project_service, user_repo, make_project, owner):
    other = user_repo.create(User(username="other", hashed_password="h", name="Other"))
    created = project_service.create_project(make_project())

    assert project_service.get_owned_project(created.project.id, owner.id).project.id == created.project.id

    with pytest.raises(OwnershipViolationError):
        project_service.get_owned_project(created.project.id, other.id)

    with pytest.raises(ProjectNotFoundError):
        project_service.get_owned_project(404, owner.id)


def test_get_all_projects_filters(project_service, make_project):
    project_service.create_project(
        make_project(title="Site", category="Website", published_status="published"),
        ["Website"]
    )
    project_service.create_project(
        make_project(title="App", category="Mobile", section_display="top"),
        ["Mobile App", "UI/UX"]
    )
    project_service.create_project(
        make_project(title="Logo", category="Branding", published_status="hidden"),
        ["Branding"]
    )

    def titles(**filters):
        return [p.project.title for p in project_service.get_all_projects(**filters)]

    assert titles() == ["Site", "App", "Logo"]
    assert titles(status=PublishedStatus.PUBLISHED) == ["Site"]
    assert titles(section=SectionDisplay.TOP) == ["App"]
    assert titles(category="branding") == ["Logo"]
    assert titles(tag="ui/ux") == ["App"]
    assert titles(status=PublishedStatus.DRAFT, tag="Website") == []


def test_get_user_projects(project_service, user_repo, make_project, owner):
    other = user_repo.create(User(username="other", hashed_password="h", name="Other"))
    project_service.create_project(make_project(title="Mine"))
    project_service.create_project(make_project(title="Theirs", user_id=other.id))

    assert [p.project.title for p in project_service.get_user_projects(owner.id)] == ["Mine"]
    assert [p.project.title for p in project_service.get_user_projects(other.id)] == ["Theirs"]
