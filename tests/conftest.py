pytest_plugins = ["reapclone.testing.conftest"]
