from taskline.service.expansion import ExpansionState
from taskline.service.zoom import ZoomController, clamp_zoom


def _tree(*project_ids):
    return {
        "root_ids": list(project_ids),
        "items": {
            project_id: {
                "id": project_id,
                "title": project_id,
                "kind": "project",
                "start_date": None,
                "end_date": None,
                "progress": 0,
                "status": "active",
                "priority": None,
                "assigned_ids": None,
                "parent_id": None,
                "children": [],
                "expanded": True,
            }
            for project_id in project_ids
        },
    }


def test_unknown_projects_default_to_expanded():
    expansion = ExpansionState()

    assert expansion.is_expanded("p1")


def test_toggle_flips_and_returns_new_state():
    expansion = ExpansionState()

    assert expansion.toggle("p1") is False
    assert not expansion.is_expanded("p1")
    assert expansion.toggle("p1") is True


def test_seed_keeps_existing_flags():
    expansion = ExpansionState({"p1": False})

    expansion.seed(["p1", "p2"])

    assert expansion.snapshot() == {"p1": False, "p2": True}


def test_apply_writes_flags_into_tree():
    tree = _tree("p1", "p2")
    expansion = ExpansionState({"p2": False})

    expansion.apply(tree)

    assert tree["items"]["p1"]["expanded"] is True
    assert tree["items"]["p2"]["expanded"] is False


def test_clamp_zoom_snaps_and_limits():
    assert clamp_zoom(100) == 100
    assert clamp_zoom(113) == 110
    assert clamp_zoom(118) == 120
    assert clamp_zoom(10) == 50
    assert clamp_zoom(400) == 150


def test_zoom_steps_stay_in_range():
    zoom = ZoomController(140)

    assert zoom.zoom_in() == 150
    assert zoom.zoom_in() == 150

    zoom.set_percent(60)
    assert zoom.zoom_out() == 50
    assert zoom.zoom_out() == 50


def test_zoom_scales_rendered_width():
    assert ZoomController(50).scale(200) == 100
    assert ZoomController(150).scale(80) == 120
    assert ZoomController(50).scale(1) == 1
