"""Company review model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text, Uuid

from jobconnect.db.base import Base


class CompanyReview(Base):
    """A job seeker's review of an employer."""

    __tablename__ = "company_reviews"

    employer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("employers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    job_seeker_id = Column(
        Uuid(as_uuid=True), ForeignKey("job_seekers.id", ondelete="CASCADE"), nullable=False
    )

    rating = Column(Integer, nullable=False)  # 1-5
    title = Column(String(255), nullable=False)
    pros = Column(Text)
    cons = Column(Text)
    advice = Column(Text)

    # Sub-ratings (1-5)
    work_life_balance = Column(Integer)
    compensation = Column(Integer)
    culture = Column(Integer)
    management = Column(Integer)

    is_current_employee = Column(Boolean, default=False, nullable=False)
    job_title = Column(String(255))
    department = Column(String(255))
    is_anonymous = Column(Boolean, default=True, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<CompanyReview {self.rating}/5 employer={self.employer_id}>"
