from sqlalchemy import Column, Integer, String
from student_api.core.database import Base


class Student(Base):
    __tablename__ = "students"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    class_ = Column("class", String)
    age = Column(Integer)
    email = Column(String)
    phone_number = Column(String)
    nationality = Column(String)
