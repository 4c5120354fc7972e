import pytest

from bsonio import BsonDefaults, JsonWriterSettings


@pytest.fixture(autouse=True)
def reset_process_defaults():
    BsonDefaults.reset()
    JsonWriterSettings.set_defaults(None)
    yield
    BsonDefaults.reset()
    JsonWriterSettings.set_defaults(None)
