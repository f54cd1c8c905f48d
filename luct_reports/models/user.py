import enum

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from luct_reports.extensions import Base
from luct_reports.security import hash_password


class Role(str, enum.Enum):
    STUDENT = "Student"
    LECTURER = "Lecturer"
    PRINCIPAL_LECTURER = "Principal Lecturer"
    PROGRAM_LEADER = "Program Leader"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Faculty(Base):
    __tablename__ = "faculty"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)

    users = relationship("User", back_populates="faculty")
    courses = relationship("Course", back_populates="faculty")

    def __repr__(self):
        return f"<Faculty id={self.id} {self.name}>"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(Enum(Role, name="user_role", values_callable=_enum_values), nullable=False)
    faculty_id = Column(Integer, ForeignKey("faculty.id"), nullable=True)

    faculty = relationship("Faculty", back_populates="users")

    def set_password(self, password: str):
        self.password_hash = hash_password(password)

    @property
    def is_lecturer(self) -> bool:
        return self.role == Role.LECTURER

    def __repr__(self):
        return f"<User id={self.id} {self.username} role={self.role.value}>"
