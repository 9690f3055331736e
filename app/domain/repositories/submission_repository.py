"""
Submission repository interface.
Defines the contract for submission persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from app.domain.models.submission import Submission


S = TypeVar("S", bound=Submission)


class SubmissionRepository(ABC, Generic[S]):
    """
    Repository interface for one kind of form submission.
    Submissions are create/read only from this service's point of view.
    """

    @abstractmethod
    def create(self, submission: S) -> S:
        """
        Persist a new submission.
        Returns the stored submission with its assigned id and timestamp.
        Raises PersistenceError when the store fails.
        """
        pass

    @abstractmethod
    def list_all(self) -> List[S]:
        """
        Return every submission of this kind, newest first.
        Raises PersistenceError when the store fails.
        """
        pass
