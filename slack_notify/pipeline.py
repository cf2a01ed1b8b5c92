"""Read-only snapshot of the CI pipeline that triggered the notification."""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Build(BaseModel):
    status: str = ""
    link: str = ""
    branch: str = ""
    tag: str = ""
    number: int = 0
    event: str = ""
    created: int = 0
    started: int = 0
    finished: int = 0

    model_config = {"frozen": True}


class Repo(BaseModel):
    owner: str = ""
    name: str = ""
    link: str = ""

    model_config = {"frozen": True}


class Commit(BaseModel):
    sha: str = ""
    author: str = ""
    author_email: str = ""
    message: str = ""
    link: str = ""

    model_config = {"frozen": True}


class Pipeline(BaseModel):
    build: Build = Build()
    repo: Repo = Repo()
    commit: Commit = Commit()

    model_config = {"frozen": True}

    def template_context(self) -> dict:
        """Mapping handed to the template renderer."""
        return {
            "build": self.build.model_dump(),
            "repo": self.repo.model_dump(),
            "commit": self.commit.model_dump(),
        }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Pipeline":
        """
        Build the snapshot from the runner's DRONE_* variables.

        Missing variables become empty strings (or zero for counters and
        timestamps).
        """
        env = os.environ if environ is None else environ

        def get(*names: str) -> str:
            for name in names:
                value = env.get(name)
                if value:
                    return value
            return ""

        def get_int(name: str) -> int:
            raw = env.get(name) or 0
            try:
                return int(raw)
            except ValueError:
                logger.warning("Ignoring non-integer %s=%r, using 0", name, raw)
                return 0

        return cls(
            build=Build(
                status=get("DRONE_BUILD_STATUS"),
                link=get("DRONE_BUILD_LINK"),
                branch=get("DRONE_BRANCH", "DRONE_COMMIT_BRANCH"),
                tag=get("DRONE_TAG"),
                number=get_int("DRONE_BUILD_NUMBER"),
                event=get("DRONE_BUILD_EVENT"),
                created=get_int("DRONE_BUILD_CREATED"),
                started=get_int("DRONE_BUILD_STARTED"),
                finished=get_int("DRONE_BUILD_FINISHED"),
            ),
            repo=Repo(
                owner=get("DRONE_REPO_OWNER", "DRONE_REPO_NAMESPACE"),
                name=get("DRONE_REPO_NAME"),
                link=get("DRONE_REPO_LINK"),
            ),
            commit=Commit(
                sha=get("DRONE_COMMIT_SHA"),
                author=get("DRONE_COMMIT_AUTHOR"),
                author_email=get("DRONE_COMMIT_AUTHOR_EMAIL"),
                message=get("DRONE_COMMIT_MESSAGE"),
                link=get("DRONE_COMMIT_LINK"),
            ),
        )
