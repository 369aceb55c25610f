"""Architecture tests using pytest-archon.

These tests enforce the boundaries of the shared kernel, which every
bounded context may use but which must not know about any of them.
"""

from pytest_archon import archrule


class TestSharedKernelBoundaries:
    """Tests that the shared kernel stays context-free."""

    def test_shared_kernel_does_not_import_bounded_contexts(self):
        """Ownership and error types are shared by IAM and Board.

        Importing either context from here would create a cycle.
        """
        (
            archrule("shared_kernel_no_contexts")
            .match("shared_kernel*")
            .should_not_import("iam*", "board*")
            .check("shared_kernel")
        )

    def test_shared_kernel_does_not_import_frameworks(self):
        """Shared kernel types should be framework-agnostic."""
        (
            archrule("shared_kernel_no_frameworks")
            .match("shared_kernel*")
            .should_not_import("fastapi*", "starlette*", "sqlalchemy*")
            .check("shared_kernel")
        )
