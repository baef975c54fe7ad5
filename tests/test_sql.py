import pytest

from proma.errors import BadRequestError, NotFoundError
from proma.models import Project, ProjectStage, User
from proma.utils.sql import apply_partial_update, sql_for_partial_update


def test_single_field_without_column_map():
    update = sql_for_partial_update({"email": "a@b.com"}, {})

    assert update.fragments == ['"email"=$1']
    assert update.set_clause == '"email"=$1'
    assert update.values == ["a@b.com"]


def test_column_map_renames_only_mapped_fields():
    update = sql_for_partial_update({"shape": "square", "isCool": "false"}, {"isCool": "is_cool"})

    assert update.set_clause == '"shape"=$1, "is_cool"=$2'
    assert update.columns == ["shape", "is_cool"]
    assert update.values == ["square", "false"]


def test_placeholders_are_contiguous_and_parallel_to_values():
    data = {"a": 1, "b": None, "c": True, "d": "x"}
    update = sql_for_partial_update(data)

    assert [fragment.split("=")[1] for fragment in update.fragments] == ["$1", "$2", "$3", "$4"]
    assert len(update.fragments) == len(update.values) == len(data)
    assert update.values == [1, None, True, "x"]


def test_empty_data_is_a_bad_request():
    with pytest.raises(BadRequestError) as exc:
        sql_for_partial_update({}, {"isCool": "is_cool"})
    assert exc.value.status_code == 400
    assert exc.value.detail == "no data"


def test_apply_partial_update_changes_only_given_columns(db_session, factory):
    board = factory.board()
    project = factory.project(board, name="Old", priority=2)

    update = sql_for_partial_update({"stage": ProjectStage.IN_PROGRESS, "priority": 5})
    updated = apply_partial_update(db_session, Project, project.id, update)

    assert updated.name == "Old"
    assert updated.priority == 5
    assert updated.stage == ProjectStage.IN_PROGRESS
    assert updated.board_id == board.id


def test_apply_partial_update_maps_attribute_names(db_session, factory):
    user = factory.user("ann")

    update = sql_for_partial_update({"firstName": "Annie"}, {"firstName": "first_name"})
    updated = apply_partial_update(db_session, User, user.id, update)

    assert updated.first_name == "Annie"
    assert updated.email == "ann@example.com"


def test_apply_partial_update_missing_row_is_not_found(db_session):
    update = sql_for_partial_update({"name": "Ghost"})

    with pytest.raises(NotFoundError) as exc:
        apply_partial_update(db_session, Project, 999, update)
    assert exc.value.status_code == 404
    assert exc.value.detail == "no project found"
