"""Shared payload fixtures shaped like GitHub's documented examples."""

import base64
from types import SimpleNamespace

import pytest

API = "https://api.github.com"


def user_payload(login="octocat", id=1):
    return {
        "login": login,
        "id": id,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": f"https://github.com/images/error/{login}_happy.gif",
        "gravatar_id": "",
        "url": f"{API}/users/{login}",
        "html_url": f"https://github.com/{login}",
        "followers_url": f"{API}/users/{login}/followers",
        "following_url": f"{API}/users/{login}/following{{/other_user}}",
        "gists_url": f"{API}/users/{login}/gists{{/gist_id}}",
        "starred_url": f"{API}/users/{login}/starred{{/owner}}{{/repo}}",
        "subscriptions_url": f"{API}/users/{login}/subscriptions",
        "organizations_url": f"{API}/users/{login}/orgs",
        "repos_url": f"{API}/users/{login}/repos",
        "events_url": f"{API}/users/{login}/events{{/privacy}}",
        "received_events_url": f"{API}/users/{login}/received_events",
        "type": "User",
        "site_admin": False,
    }


_REPO_URL_FIELDS = [
    "archive_url", "assignees_url", "blobs_url", "branches_url", "collaborators_url",
    "comments_url", "commits_url", "compare_url", "contents_url", "contributors_url",
    "deployments_url", "downloads_url", "events_url", "forks_url", "git_commits_url",
    "git_refs_url", "git_tags_url", "hooks_url", "issue_comment_url", "issue_events_url",
    "issues_url", "keys_url", "labels_url", "languages_url", "merges_url", "milestones_url",
    "notifications_url", "pulls_url", "releases_url", "stargazers_url", "statuses_url",
    "subscribers_url", "subscription_url", "tags_url", "teams_url", "trees_url",
]


def repo_payload(owner="octocat", name="Hello-World"):
    base = f"{API}/repos/{owner}/{name}"
    payload = {
        "id": 1296269,
        "node_id": "MDEwOlJlcG9zaXRvcnkxMjk2MjY5",
        "owner": user_payload(owner),
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": "This your first repo!",
        "private": False,
        "fork": False,
        "url": base,
        "html_url": f"https://github.com/{owner}/{name}",
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "git_url": f"git:github.com/{owner}/{name}.git",
        "ssh_url": f"git@github.com:{owner}/{name}.git",
        "svn_url": f"https://svn.github.com/{owner}/{name}",
        "mirror_url": None,
        "homepage": "https://github.com",
        "language": None,
        "forks_count": 9,
        "stargazers_count": 80,
        "watchers_count": 80,
        "size": 108,
        "default_branch": "master",
        "open_issues_count": 0,
        "has_issues": True,
        "has_projects": True,
        "has_wiki": True,
        "has_pages": False,
        "has_downloads": True,
        "archived": False,
        "pushed_at": "2011-01-26T19:06:43Z",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:14:43Z",
    }
    for field in _REPO_URL_FIELDS:
        payload[field] = f"{base}/{field.removesuffix('_url')}"
    return payload


def label_payload(name="bug"):
    return {
        "id": 208045946,
        "url": f"{API}/repos/octocat/Hello-World/labels/{name}",
        "name": name,
        "color": "f29513",
        "default": True,
    }


def issue_payload(number=1347):
    base = f"{API}/repos/octocat/Hello-World/issues/{number}"
    return {
        "id": 1,
        "url": base,
        "repository_url": f"{API}/repos/octocat/Hello-World",
        "labels_url": f"{base}/labels{{/name}}",
        "comments_url": f"{base}/comments",
        "events_url": f"{base}/events",
        "html_url": f"https://github.com/octocat/Hello-World/issues/{number}",
        "number": number,
        "state": "open",
        "title": "Found a bug",
        "body": "I'm having a problem with this.",
        "user": user_payload(),
        "labels": [label_payload()],
        "assignee": None,
        "assignees": [],
        "milestone": None,
        "locked": False,
        "comments": 0,
        "pull_request": {
            "url": f"{API}/repos/octocat/Hello-World/pulls/{number}",
            "html_url": f"https://github.com/octocat/Hello-World/pull/{number}",
            "diff_url": f"https://github.com/octocat/Hello-World/pull/{number}.diff",
            "patch_url": f"https://github.com/octocat/Hello-World/pull/{number}.patch",
        },
        "closed_at": None,
        "created_at": "2011-04-22T13:33:48Z",
        "updated_at": "2011-04-22T13:33:48Z",
        "score": 1.0,
    }


def pull_ref_payload(ref="new-topic", sha="6dcb09b5b57875f334f61aebed695e2e4193db5e"):
    return {
        "label": f"octocat:{ref}",
        "ref": ref,
        "sha": sha,
        "user": user_payload(),
        "repo": {
            "id": 1296269,
            "name": "Hello-World",
            "full_name": "octocat/Hello-World",
            "private": False,
            "html_url": "https://github.com/octocat/Hello-World",
            "owner": user_payload(),
        },
    }


def pull_payload(number=1347):
    base = f"{API}/repos/octocat/Hello-World/pulls/{number}"
    return {
        "id": 1,
        "url": base,
        "html_url": f"https://github.com/octocat/Hello-World/pull/{number}",
        "diff_url": f"https://github.com/octocat/Hello-World/pull/{number}.diff",
        "patch_url": f"https://github.com/octocat/Hello-World/pull/{number}.patch",
        "issue_url": f"{API}/repos/octocat/Hello-World/issues/{number}",
        "commits_url": f"{base}/commits",
        "review_comments_url": f"{base}/comments",
        "review_comment_url": f"{API}/repos/octocat/Hello-World/pulls/comments{{/number}}",
        "comments_url": f"{API}/repos/octocat/Hello-World/issues/{number}/comments",
        "statuses_url": f"{API}/repos/octocat/Hello-World/statuses/6dcb09b5b57875f334f61aebed695e2e4193db5e",
        "number": number,
        "state": "open",
        "locked": True,
        "title": "new-feature",
        "body": "Please pull these awesome changes",
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:01:12Z",
        "closed_at": "2011-01-26T19:01:12Z",
        "merged_at": "2011-01-26T19:01:12Z",
        "merge_commit_sha": "e5bd3914e2e596debea16f433f57875b5b90bcd6",
        "head": pull_ref_payload(),
        "base": pull_ref_payload("master"),
        "user": user_payload(),
        "assignee": user_payload("hubot", 2),
        "assignees": [user_payload("hubot", 2)],
        "labels": [label_payload()],
        "draft": False,
    }


def commit_payload(sha="6dcb09b5b57875f334f61aebed695e2e4193db5e"):
    base = f"{API}/repos/octocat/Hello-World"
    return {
        "url": f"{base}/commits/{sha}",
        "sha": sha,
        "html_url": f"https://github.com/octocat/Hello-World/commit/{sha}",
        "comments_url": f"{base}/commits/{sha}/comments",
        "commit": {
            "url": f"{base}/git/commits/{sha}",
            "author": {"name": "Monalisa Octocat", "email": "support@github.com", "date": "2011-04-14T16:00:49Z"},
            "committer": {"name": "Monalisa Octocat", "email": "support@github.com", "date": "2011-04-14T16:00:49Z"},
            "message": "Fix all the bugs",
            "tree": {"url": f"{base}/tree/{sha}", "sha": sha},
            "comment_count": 0,
            "verification": {"verified": False, "reason": "unsigned"},
        },
        "author": user_payload(),
        "committer": user_payload(),
        "parents": [{"url": f"{base}/commits/{sha}", "sha": sha}],
    }


def check_run_payload():
    return {
        "id": 4,
        "head_sha": "ce587453ced02b1526dfb4cb910479d431683101",
        "node_id": "MDg6Q2hlY2tSdW40",
        "external_id": "",
        "url": f"{API}/repos/github/hello-world/check-runs/4",
        "html_url": "https://github.com/github/hello-world/runs/4",
        "details_url": "https://example.com",
        "status": "completed",
        "conclusion": "neutral",
        "started_at": "2018-05-04T01:14:52Z",
        "completed_at": "2018-05-04T01:14:52Z",
        "output": {
            "title": "Mighty Readme report",
            "summary": "There are 0 failures, 2 warnings, and 1 notices.",
            "text": "You may have some misspelled words on lines 2 and 4.",
            "annotations_count": 2,
            "annotations_url": f"{API}/repos/github/hello-world/check-runs/4/annotations",
        },
        "name": "mighty_readme",
        "check_suite": {"id": 5},
    }


def file_payload(content=b"hello world\n", encoding="base64"):
    encoded = base64.b64encode(content).decode()
    # GitHub wraps encoded content
    wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60)) + "\n"
    url = f"{API}/repos/octokit/octokit.rb/contents/README.md"
    return {
        "type": "file",
        "encoding": encoding,
        "size": len(content),
        "name": "README.md",
        "path": "README.md",
        "content": wrapped,
        "sha": "3d21ec53a331a6f037a91c368710b99387d012c1",
        "url": url,
        "git_url": f"{API}/repos/octokit/octokit.rb/git/blobs/3d21ec53a331a6f037a91c368710b99387d012c1",
        "html_url": "https://github.com/octokit/octokit.rb/blob/master/README.md",
        "download_url": "https://raw.githubusercontent.com/octokit/octokit.rb/master/README.md",
        "_links": {
            "git": f"{API}/repos/octokit/octokit.rb/git/blobs/3d21ec53a331a6f037a91c368710b99387d012c1",
            "self": url,
            "html": "https://github.com/octokit/octokit.rb/blob/master/README.md",
        },
    }


def search_envelope(items, total_count=None, incomplete_results=False):
    return {
        "total_count": len(items) if total_count is None else total_count,
        "incomplete_results": incomplete_results,
        "items": items,
    }


@pytest.fixture
def user_json():
    return user_payload()


@pytest.fixture
def repo_json():
    return repo_payload()


@pytest.fixture
def issue_json():
    return issue_payload()


@pytest.fixture
def pull_json():
    return pull_payload()


@pytest.fixture
def commit_json():
    return commit_payload()


@pytest.fixture
def check_run_json():
    return check_run_payload()


@pytest.fixture
def file_json():
    return file_payload()


@pytest.fixture
def payloads():
    """Payload builders for tests that need variations."""
    return SimpleNamespace(
        user=user_payload,
        repo=repo_payload,
        label=label_payload,
        issue=issue_payload,
        pull=pull_payload,
        pull_ref=pull_ref_payload,
        commit=commit_payload,
        check_run=check_run_payload,
        file=file_payload,
        search=search_envelope,
    )
