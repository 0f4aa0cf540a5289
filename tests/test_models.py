import unittest

from rackspace._models import LastError, Resolution, ServiceCatalogEntry
from rackspace._session import SessionState
from rackspace.exceptions import AuthenticationError


class TestServiceCatalogEntry(unittest.TestCase):
    def test_from_dict_uses_first_endpoint(self):
        entry = ServiceCatalogEntry.from_dict(
            {
                "name": "cloudFiles",
                "endpoints": [
                    {"publicURL": "https://storage.dfw.example.com/v1/acct"},
                    {"publicURL": "https://storage.ord.example.com/v1/acct"},
                ],
            }
        )

        self.assertEqual(entry.name, "cloudFiles")
        self.assertEqual(entry.public_url, "https://storage.dfw.example.com/v1/acct")

    def test_from_dict_without_endpoints(self):
        self.assertIsNone(ServiceCatalogEntry.from_dict({"name": "cloudFiles", "endpoints": []}))
        self.assertIsNone(ServiceCatalogEntry.from_dict({"name": "cloudFiles"}))
        self.assertIsNone(ServiceCatalogEntry.from_dict({"endpoints": [{"publicURL": "https://x"}]}))
        self.assertIsNone(ServiceCatalogEntry.from_dict({"name": "cloudFiles", "endpoints": [{}]}))


class TestResolution(unittest.TestCase):
    def test_unwrap_value(self):
        self.assertEqual(Resolution(value="abc").unwrap(), "abc")
        self.assertIsNone(Resolution().unwrap())

    def test_unwrap_failure_raises(self):
        resolution = Resolution(failed=True, error=LastError(message="Unauthorized", status_code=401))

        with self.assertRaises(AuthenticationError) as context:
            resolution.unwrap()

        self.assertEqual(context.exception.status_code, 401)
        self.assertEqual(context.exception.body, "Unauthorized")
        self.assertIsInstance(context.exception, RuntimeError)

    def test_to_dict_excludes_none(self):
        self.assertEqual(Resolution(value="abc").to_dict(), {"value": "abc", "failed": False})


class TestSessionState(unittest.TestCase):
    def test_starts_empty(self):
        session = SessionState()

        self.assertFalse(session.is_authenticated)
        self.assertIsNone(session.token)
        self.assertIsNone(session.storage_url)
        self.assertIsNone(session.cdn_url)
        self.assertIsNone(session.management_url)
        self.assertIsNone(session.last_error)

    def test_error_lifecycle(self):
        session = SessionState()

        session.set_error("boom", 500)
        self.assertEqual(session.last_error, LastError(message="boom", status_code=500))

        session.clear_error()
        self.assertIsNone(session.last_error)

    def test_reset(self):
        session = SessionState(token="t", cdn_url="https://cdn", management_url="https://servers")
        session.set_error("boom", 500)

        session.reset()

        self.assertEqual(session, SessionState())

    def test_to_dict_masks_token(self):
        session = SessionState(token="secret-token", cdn_url="https://cdn")

        data = session.to_dict()

        self.assertEqual(data["token"], "***")
        self.assertEqual(data["cdn_url"], "https://cdn")
        self.assertNotIn("secret-token", session.to_json())


if __name__ == "__main__":
    unittest.main()
