from stackdeck.testing.fixtures import memory_app  # noqa: F401
