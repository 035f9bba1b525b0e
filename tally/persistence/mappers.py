"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from tally.domain.model import VOTABLE_MODELS, Votable, VoteRecord
from tally.domain.value import VotableType
from tally.persistence.tables import VOTE_COLUMNS


def row_to_vote_record(row: Dict[str, Any]) -> VoteRecord:
    """Convert the vote columns of a database row to a VoteRecord.

    Args:
        row: Database row as dict

    Returns:
        VoteRecord value
    """
    return VoteRecord(
        up_voter_ids=frozenset(row.get("up_voter_ids") or ()),
        down_voter_ids=frozenset(row.get("down_voter_ids") or ()),
        up_count=row.get("up_count", 0),
        down_count=row.get("down_count", 0),
        vote_count=row.get("vote_count", 0),
        vote_point=row.get("vote_point", 0),
    )


def row_to_votable(votable_type: VotableType, row: Dict[str, Any]) -> Votable:
    """Convert database row to the domain model of a votable type.

    Args:
        votable_type: Which table the row came from
        row: Database row as dict

    Returns:
        Post, Comment or User domain model
    """
    model = VOTABLE_MODELS[votable_type]
    fields = {key: value for key, value in row.items() if key not in VOTE_COLUMNS}
    return model(**fields, votes=row_to_vote_record(row))


def votable_to_dict(entity: Votable) -> Dict[str, Any]:
    """Convert a votable domain model to database dict.

    Args:
        entity: Votable domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = entity.model_dump(exclude={"votes"})
    votes = entity.votes
    data.update(
        up_voter_ids=list(votes.up_voter_ids),
        down_voter_ids=list(votes.down_voter_ids),
        up_count=votes.up_count,
        down_count=votes.down_count,
        vote_count=votes.vote_count,
        vote_point=votes.vote_point,
    )
    return data
