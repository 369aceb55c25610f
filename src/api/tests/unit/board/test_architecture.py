"""Architecture tests for the Board bounded context.

Board depends on IAM only for identities (value objects, the user port and
its dependency wiring). It must not reach into IAM's presentation layer or
application services.
"""

from pytest_archon import archrule


class TestBoardBoundedContextIsolation:
    """Tests for Board's dependencies on other contexts."""

    def test_board_does_not_import_iam_presentation(self):
        (
            archrule("board_no_iam_presentation")
            .match("board*")
            .should_not_import("iam.presentation*")
            .check("board")
        )

    def test_board_core_does_not_import_iam_services(self):
        """Ownership is decided by board services, not by IAM services."""
        (
            archrule("board_core_no_iam_services")
            .match("board.domain*", "board.application*")
            .should_not_import("iam.application.services*")
            .check("board")
        )


class TestBoardLayering:
    """Tests for the layer rules inside Board."""

    def test_domain_does_not_import_outer_layers(self):
        (
            archrule("board_domain_is_pure")
            .match("board.domain*")
            .should_not_import(
                "board.application*",
                "board.infrastructure*",
                "board.presentation*",
                "board.dependencies*",
                "sqlalchemy*",
                "fastapi*",
            )
            .check("board")
        )

    def test_application_does_not_import_infrastructure(self):
        (
            archrule("board_application_no_infrastructure")
            .match("board.application*")
            .should_not_import("board.infrastructure*", "board.presentation*", "fastapi*")
            .check("board")
        )
