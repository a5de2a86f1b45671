from sqlalchemy import Column, String, Integer, JSON
from league_app.database import Base
import uuid

class Competition(Base):
    """One competition aggregate: teams, fixtures, results and the derived table.

    ``teams`` holds the admin-authored rosters (baseline stats); ``standings``
    is the engine's last output and is never fed back into it.
    """
    __tablename__ = "competitions"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    status = Column(String, nullable=False, default="active")

    teams = Column(JSON, nullable=False, default=list)
    fixtures = Column(JSON, nullable=False, default=list)
    results = Column(JSON, nullable=False, default=list)
    standings = Column(JSON, nullable=False, default=list)

    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
