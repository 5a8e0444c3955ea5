"""Small types and Enums used by repopull."""

from enum import Enum


class OutcomeKind(str, Enum):
    """How processing a single repository ended."""

    success = "Success"
    skipped_missing_directory = "SkippedMissingDirectory"
    skipped_not_a_vcs_repo = "SkippedNotAVcsRepo"
    branch_not_found = "BranchNotFound"
    checkout_failed = "CheckoutFailed"
    pull_failed = "PullFailed"
    unexpected_error = "UnexpectedError"
