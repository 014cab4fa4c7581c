from sqlalchemy import Column, Float, Integer, String, UniqueConstraint

from roster.db.base_class import Base


class WeeklyRow(Base):
    __tablename__ = "weekly_data"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False, index=True)
    mail = Column(String(255), nullable=True)
    week = Column(Integer, nullable=False, index=True)

    attendance = Column(String(8), nullable=True)
    group_id = Column(String(64), nullable=False, default="")
    ta = Column(String(64), nullable=True)
    total = Column(Float, nullable=True)

    # Grading sub-scores
    fa = Column(Integer, nullable=True)
    fb = Column(Integer, nullable=True)
    fc = Column(Integer, nullable=True)
    fd = Column(Integer, nullable=True)

    bonus_attempt = Column(Integer, nullable=True)
    bonus_answer_quality = Column(Integer, nullable=True)
    bonus_follow_up = Column(Integer, nullable=True)

    # "yes" / "no"
    exercise_submitted = Column(String(8), nullable=True)
    exercise_test_passing = Column(String(8), nullable=True)
    exercise_good_documentation = Column(String(8), nullable=True)
    exercise_good_structure = Column(String(8), nullable=True)

    __table_args__ = (
        UniqueConstraint("name", "week", name="uq_weekly_data_name_week"),
    )
