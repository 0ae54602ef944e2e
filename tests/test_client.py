import json
import unittest

import httpx

from repo_cli.core import RepoRequest, parse_private_answer, ssh_clone_url
from repo_cli.core.client import GitHubAPIError, GitHubClient


class TestGitHubClient(unittest.TestCase):
    def setUp(self):
        self.requests = []

    def make_client(self, handler):
        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        return GitHubClient(
            "secret-token",
            base_url="https://api.example.test",
            transport=httpx.MockTransport(recording_handler),
        )

    def test_create_repository_success(self):
        """The request carries the token and payload; html_url is returned"""
        client = self.make_client(
            lambda request: httpx.Response(201, json={"html_url": "https://github.com/me/demo"})
        )
        url = client.create_repository(RepoRequest(name="demo", description="A demo", private=False))

        self.assertEqual(url, "https://github.com/me/demo")
        request = self.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(str(request.url), "https://api.example.test/user/repos")
        self.assertEqual(request.headers["Authorization"], "Bearer secret-token")
        self.assertEqual(request.headers["Accept"], "application/vnd.github+json")
        self.assertEqual(request.headers["User-Agent"], "github-repo-creater")
        self.assertEqual(
            json.loads(request.content),
            {"name": "demo", "description": "A demo", "private": False, "auto_init": True},
        )

    def test_empty_description_is_sent_as_null(self):
        client = self.make_client(
            lambda request: httpx.Response(201, json={"html_url": "https://github.com/me/x"})
        )
        client.create_repository(RepoRequest(name="x", description=""))
        self.assertIsNone(json.loads(self.requests[0].content)["description"])

    def test_error_status_raises(self):
        client = self.make_client(
            lambda request: httpx.Response(422, text='{"message":"name already exists"}')
        )
        with self.assertRaises(GitHubAPIError) as ctx:
            client.create_repository(RepoRequest(name="dup"))
        self.assertEqual(ctx.exception.status_code, 422)
        self.assertIn("GitHub API error:", str(ctx.exception))
        self.assertIn("name already exists", str(ctx.exception))

    def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = self.make_client(handler)
        with self.assertRaises(GitHubAPIError) as ctx:
            client.create_repository(RepoRequest(name="x"))
        self.assertIsNone(ctx.exception.status_code)

    def test_malformed_response_raises(self):
        client = self.make_client(lambda request: httpx.Response(201, text="not json"))
        with self.assertRaises(GitHubAPIError):
            client.create_repository(RepoRequest(name="x"))

    def test_context_manager_closes_client(self):
        client = self.make_client(lambda request: httpx.Response(204))
        with client:
            pass
        self.assertTrue(client.client.is_closed)


class TestRepository(unittest.TestCase):
    def test_ssh_clone_url(self):
        self.assertEqual(
            ssh_clone_url("https://github.com/octo/hello-world"),
            "git@github.com:octo/hello-world.git",
        )
        self.assertEqual(
            ssh_clone_url("https://github.com/octo/hello.git"),
            "git@github.com:octo/hello.git",
        )

    def test_private_answer(self):
        self.assertTrue(parse_private_answer(""))
        self.assertTrue(parse_private_answer("y"))
        self.assertTrue(parse_private_answer("yes"))
        self.assertFalse(parse_private_answer("n"))
        self.assertFalse(parse_private_answer("N"))
        # Only an exact "n" opts out; surrounding spaces keep it private
        self.assertTrue(parse_private_answer(" n"))
        self.assertTrue(parse_private_answer("n "))

    def test_visibility(self):
        self.assertEqual(RepoRequest(name="a").visibility, "private")
        self.assertEqual(RepoRequest(name="a", private=False).visibility, "public")


if __name__ == "__main__":
    unittest.main()
