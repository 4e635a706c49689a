"""Tests for board views and drag and drop handling."""

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from project_board.core.board_core.config import BoardConfig
from project_board.core.board_core.projects import Project, ProjectStatus
from project_board.core.board_core.state import ProjectState, counter_ids
from project_board.core.board_core.views import (
    PROJECT_ID_TYPE,
    DragEvent,
    Draggable,
    DragTarget,
    ProjectInput,
    ProjectItem,
    ProjectList,
)


def render_text(renderable) -> str:
    console = Console(width=120, record=True)
    console.print(renderable)
    return console.export_text()


@pytest.fixture
def state():
    return ProjectState(id_factory=counter_ids())


@pytest.fixture
def active_list(state):
    return ProjectList(state, ProjectStatus.ACTIVE)


@pytest.fixture
def finished_list(state):
    return ProjectList(state, ProjectStatus.FINISHED)


class TestDragEvent:
    """Test the drag payload carrier."""

    def test_set_and_get_data(self):
        event = DragEvent()
        event.set_data(PROJECT_ID_TYPE, "42")
        assert event.types == [PROJECT_ID_TYPE]
        assert event.get_data(PROJECT_ID_TYPE) == "42"

    def test_missing_data_is_empty(self):
        assert DragEvent().get_data(PROJECT_ID_TYPE) == ""

    def test_prevent_default(self):
        event = DragEvent()
        event.prevent_default()
        assert event.default_prevented

    def test_interfaces_are_abstract(self):
        """Test drag roles cannot be used without handlers."""
        with pytest.raises(TypeError):
            Draggable()
        with pytest.raises(TypeError):
            DragTarget()


class TestProjectItem:
    """Test the single project card."""

    def test_persons_singular(self):
        item = ProjectItem(Project(id="1", title="Solo", description="one", people=1))
        assert item.persons == "1 person"

    def test_persons_plural(self):
        item = ProjectItem(Project(id="1", title="Team", description="many", people=4))
        assert item.persons == "4 people"

    def test_drag_start_carries_project_id(self):
        """Test starting a drag puts the id on the event."""
        item = ProjectItem(Project(id="abc", title="Team", description="many", people=4))
        event = DragEvent()

        item.drag_start_handler(event)

        assert event.get_data(PROJECT_ID_TYPE) == "abc"
        assert event.effect_allowed == "move"

    def test_render(self):
        item = ProjectItem(Project(id="abc", title="Team", description="many hands", people=4))
        panel = item.render()
        assert isinstance(panel, Panel)
        text = render_text(panel)
        assert "Team" in text
        assert "4 people assigned" in text
        assert "many hands" in text

    def test_render_shows_brackets_literally(self):
        """Test titles and descriptions are not read as markup."""
        item = ProjectItem(Project(id="abc", title="fix [/] parser", description="[red]", people=2))
        text = render_text(item.render())
        assert "fix [/] parser" in text
        assert "[red]" in text


class TestProjectList:
    """Test per-status lists as store observers and drop targets."""

    def test_title(self, active_list, finished_list):
        assert active_list.title == "ACTIVE PROJECTS"
        assert finished_list.title == "FINISHED PROJECTS"

    def test_lists_filter_by_own_status(self, state, active_list, finished_list):
        """Test each list only keeps projects in its status."""
        state.add_project("A", "first", 1)
        state.add_project("B", "second", 2)
        state.move_project("2", ProjectStatus.FINISHED)

        assert [p.title for p in active_list.assigned_projects] == ["A"]
        assert [p.title for p in finished_list.assigned_projects] == ["B"]
        assert [i.project.id for i in finished_list.items] == ["2"]

    def test_drag_over_accepts_project_ids(self, active_list):
        """Test only project id payloads make the list droppable."""
        event = DragEvent()
        event.set_data(PROJECT_ID_TYPE, "1")

        active_list.drag_over_handler(event)

        assert event.default_prevented
        assert active_list.droppable

    def test_drag_over_rejects_other_payloads(self, active_list):
        event = DragEvent()
        event.set_data("text/html", "<b>1</b>")

        active_list.drag_over_handler(event)

        assert not event.default_prevented
        assert not active_list.droppable

    def test_drag_leave_clears_droppable(self, active_list):
        active_list.droppable = True
        active_list.drag_leave_handler(DragEvent())
        assert not active_list.droppable

    def test_drop_moves_project(self, state, active_list, finished_list):
        """Test dropping a card on a list moves it to that status."""
        state.add_project("A", "first", 1)
        event = DragEvent()
        active_list.items[0].drag_start_handler(event)

        finished_list.drag_over_handler(event)
        finished_list.drop_handler(event)

        assert state.projects[0].status == ProjectStatus.FINISHED
        assert active_list.assigned_projects == []
        assert [p.title for p in finished_list.assigned_projects] == ["A"]
        assert not finished_list.droppable

    def test_drop_on_same_list_is_noop(self, state, active_list):
        """Test dropping onto the current list sends no update."""
        updates = []
        state.add_project("A", "first", 1)
        state.add_listener(updates.append)
        event = DragEvent()
        active_list.items[0].drag_start_handler(event)

        active_list.drop_handler(event)

        assert updates == []

    def test_drop_unknown_id_is_noop(self, state, finished_list):
        state.add_project("A", "first", 1)
        event = DragEvent()
        event.set_data(PROJECT_ID_TYPE, "missing")

        finished_list.drop_handler(event)

        assert state.projects[0].status == ProjectStatus.ACTIVE

    def test_render(self, state, active_list):
        state.add_project("Docs", "user guide", 2)
        table = active_list.render()
        assert isinstance(table, Table)
        text = render_text(table)
        assert "ACTIVE PROJECTS" in text
        assert "Docs" in text
        assert "2 people" in text

    def test_render_shows_brackets_literally(self, state, active_list):
        """Test bracketed titles render as typed."""
        state.add_project("fix [/] parser", "[red]", 2)
        text = render_text(active_list.render())
        assert "fix [/] parser" in text
        assert "[red]" in text


class TestProjectInput:
    """Test the submission form."""

    @pytest.fixture
    def form(self, state):
        return ProjectInput(state, BoardConfig())

    def test_valid_submission_adds_project(self, state, form):
        assert form.submit("Build API", "backend work", "3") is True

        projects = state.projects
        assert len(projects) == 1
        assert projects[0].people == 3
        assert form.last_error is None

    def test_submission_trims_text(self, state, form):
        form.submit("  Build API  ", "  backend work ", 3)
        assert state.projects[0].title == "Build API"
        assert state.projects[0].description == "backend work"

    @pytest.mark.parametrize("title,description,people,error", [
        ("", "backend work", 3, "title is required"),
        ("Build API", "b", 3, "description needs at least 2 characters"),
        ("Build API", "backend work", 0, "people must be between 1 and 5"),
        ("Build API", "backend work", 6, "people must be between 1 and 5"),
        ("Build API", "backend work", "many", "people must be a whole number"),
    ])
    def test_invalid_submission_is_rejected(self, state, form, title, description, people, error):
        """Test rejected input never reaches the store."""
        assert form.submit(title, description, people) is False
        assert error in form.last_error
        assert state.projects == []

    def test_limits_come_from_config(self, state):
        form = ProjectInput(state, BoardConfig(max_people=10))
        assert form.submit("Big team", "lots of people", 8) is True

    def test_gather_user_inputs(self, form):
        assert form.gather_user_inputs("T", "desc", "2") == ("T", "desc", 2)
