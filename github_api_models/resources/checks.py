"""Check runs.

Status, conclusion and annotation level are open enums: GitHub has added
values to each of them since the Checks API launched.
"""

from enum import Enum

from ..base import Options, Resource
from ..codec import Int, Nullable, Timestamp
from ..enums import enum_policy, tag


@enum_policy(fallback=True)
class CheckRunStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    WAITING = "waiting"
    REQUESTED = "requested"
    PENDING = "pending"


@enum_policy(fallback=True)
class Conclusion(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"
    SKIPPED = "skipped"
    STALE = "stale"


@enum_policy(fallback=True)
class AnnotationLevel(str, Enum):
    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class Annotation(Resource):
    path: str
    start_line: Int
    end_line: Int
    start_column: Nullable[Int]
    end_column: Nullable[Int]
    annotation_level: tag(AnnotationLevel)
    message: str
    title: Nullable[str]
    raw_details: Nullable[str]


class Image(Resource):
    alt: str
    image_url: str
    caption: Nullable[str]


class Action(Resource):
    label: str
    description: str
    identifier: str


class Output(Resource):
    """Check run output.

    Runs without output still get an object from GitHub, with null title and
    summary, so both are nullable here.
    """

    title: Nullable[str]
    summary: Nullable[str]
    text: Nullable[str]
    annotations_count: Nullable[Int]
    annotations_url: Nullable[str]
    annotations: Nullable[tuple[Annotation, ...]]
    images: Nullable[tuple[Image, ...]]


class CheckSuite(Resource):
    id: Int


class CheckRun(Resource):
    id: Int
    name: str
    head_sha: str
    url: str
    check_suite: CheckSuite
    details_url: Nullable[str]
    external_id: Nullable[str]
    status: Nullable[tag(CheckRunStatus)]
    started_at: Nullable[Timestamp]
    conclusion: Nullable[tag(Conclusion)]
    completed_at: Nullable[Timestamp]
    output: Nullable[Output]
    actions: Nullable[tuple[Action, ...]]


class AnnotationOptions(Options):
    path: str
    start_line: Int
    end_line: Int
    annotation_level: tag(AnnotationLevel)
    message: str
    start_column: Int | None = None
    end_column: Int | None = None
    title: str | None = None
    raw_details: str | None = None


class ImageOptions(Options):
    alt: str
    image_url: str
    caption: str | None = None


class ActionOptions(Options):
    label: str
    description: str
    identifier: str


class OutputOptions(Options):
    title: str
    summary: str
    text: str | None = None
    annotations: tuple[AnnotationOptions, ...] | None = None
    images: tuple[ImageOptions, ...] | None = None


class CheckRunOptions(Options):
    name: str
    head_sha: str
    details_url: str | None = None
    external_id: str | None = None
    status: tag(CheckRunStatus) | None = None
    started_at: Timestamp | None = None
    conclusion: tag(Conclusion) | None = None
    completed_at: Timestamp | None = None
    output: OutputOptions | None = None
    actions: tuple[ActionOptions, ...] | None = None


class CheckRunUpdateOptions(Options):
    name: str | None = None
    details_url: str | None = None
    external_id: str | None = None
    status: tag(CheckRunStatus) | None = None
    started_at: Timestamp | None = None
    conclusion: tag(Conclusion) | None = None
    completed_at: Timestamp | None = None
    output: OutputOptions | None = None
    actions: tuple[ActionOptions, ...] | None = None
