"""Admin panel wiring."""

# Local application imports
from main import app
from smartmunic.admin.views import ADMIN_VIEWS, IssueAdmin, TechnicianAdmin
from smartmunic.models.issues import Issue
from smartmunic.models.technicians import Technician


class TestAdminViews:
    def test_admin_mounted(self):
        assert "/admin" in [getattr(route, "path", None) for route in app.routes]

    def test_views_bound_to_models(self):
        assert IssueAdmin.model is Issue
        assert TechnicianAdmin.model is Technician

    def test_every_view_resolves_primary_key(self):
        for view in ADMIN_VIEWS:
            assert [column.name for column in view.pk_columns] == ["id"], view.__name__
