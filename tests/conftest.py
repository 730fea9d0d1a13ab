pytest_plugins = ["loggo.testing.fixtures"]
