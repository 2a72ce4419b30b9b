class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


# ------------------------- DATASET -------------------------


class DatasetError(RepoError):
    """Generic dataset source error."""

    pass


class DatasetReadError(DatasetError):
    """Raised when the raw exercise dataset can't be read."""

    pass


# ------------------------- EXERCISE -------------------------
class ExerciseRepoError(RepoError):
    """Generic exercise repository error"""

    pass
