"""
Job seeker interaction models
Saved jobs (bookmarks) and job matches
"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, JSON, Numeric, Text, Uuid
from sqlalchemy.orm import relationship

from jobconnect.db.base import Base


class SavedJob(Base):
    """
    Jobs bookmarked by job seekers
    One row per (job seeker, job) pair
    """
    __tablename__ = "saved_jobs"

    job_seeker_id = Column(
        Uuid(as_uuid=True), ForeignKey("job_seekers.id", ondelete="CASCADE"), nullable=False
    )
    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)

    notes = Column(Text, nullable=True)  # Job seeker's private notes

    # Relationships
    job = relationship("Job")

    # Indexes
    __table_args__ = (
        Index("idx_saved_jobs_job_seeker", "job_seeker_id"),
        Index("idx_saved_jobs_job", "job_id"),
        Index("idx_saved_jobs_job_seeker_job", "job_seeker_id", "job_id", unique=True),  # Prevent duplicates
    )

    def __repr__(self):
        return f"<SavedJob(job_seeker_id={self.job_seeker_id}, job_id={self.job_id})>"


class JobMatch(Base):
    """
    Job recommendations for job seekers
    Read by the dashboard; no matcher populates this table yet
    """
    __tablename__ = "job_matches"

    job_seeker_id = Column(
        Uuid(as_uuid=True), ForeignKey("job_seekers.id", ondelete="CASCADE"), nullable=False
    )
    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)

    match_score = Column(Numeric(3, 2))  # 0.00 - 1.00
    match_reasons = Column(JSON, default=list)
    is_viewed = Column(Boolean, default=False, nullable=False)
    is_dismissed = Column(Boolean, default=False, nullable=False)

    # Indexes
    __table_args__ = (
        Index("idx_job_matches_job_seeker_score", "job_seeker_id", "match_score"),
        Index("idx_job_matches_job_seeker_job", "job_seeker_id", "job_id", unique=True),
    )

    def __repr__(self):
        return f"<JobMatch(job_seeker_id={self.job_seeker_id}, job_id={self.job_id}, score={self.match_score})>"
