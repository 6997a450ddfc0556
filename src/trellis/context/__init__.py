from .context import (
    REGISTRY_CONTEXT,
    TEST_CONTEXT,
    TestContext,
    current_test,
    registry_scope,
    test_context_scope,
)

__all__ = [
    "REGISTRY_CONTEXT",
    "TEST_CONTEXT",
    "TestContext",
    "current_test",
    "registry_scope",
    "test_context_scope",
]
