from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    TUTOR = "tutor"
    ADMIN = "admin"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    UNSET = ""


class Occupation(str, Enum):
    STUDENT = "Student"
    FRESHER = "Fresher"
    GRADUATE = "Graduate"
    WORKING_PROFESSIONAL = "Working Professional"
    UNSET = ""
