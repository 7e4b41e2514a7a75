# mentorium/demo/generator.py
"""Demo roster with realistic Ghanaian names"""
import random
from typing import List, Optional

from mentorium.config import DEMO_STUDENT_COUNT
from mentorium.models import Student
from mentorium.utils import round_score

FEMALE_FIRST_NAMES = [
    "Ama", "Akosua", "Esi", "Abena", "Afua", "Adwoa", "Akua", "Yaa",
    "Araba", "Afriyie", "Serwaa", "Abigail", "Beatrice", "Comfort", "Dorcas", "Evelyn",
]
MALE_FIRST_NAMES = [
    "Kofi", "Yaw", "Kwame", "Kojo", "Kwesi", "Kwaku", "Kwabena", "Paa",
    "Ebo", "Nii", "Daniel", "Francis", "Michael", "Samuel", "Emmanuel", "Peter",
]
LAST_NAMES = [
    "Mensah", "Owusu", "Boateng", "Acheampong", "Adjei", "Osei", "Asante", "Appiah", "Addo", "Ankrah",
    "Nkrumah", "Arthur", "Annor", "Forson", "Amoah", "Opoku", "Agyei", "Frimpong", "Obeng", "Amponsah",
]
# Split by gender so a girl never gets "Kwaku" as a middle name
MALE_MIDDLE_NAMES = [
    "Kwaku", "Kwabena", "Yaw", "Kofi", "Kojo", "Kwesi", "Kweku", "Mensah", "Nana", "Yawson",
]
FEMALE_MIDDLE_NAMES = [
    "Akua", "Adwoa", "Afua", "Abena", "Esi", "Yaa", "Serwaa", "Efua", "Mansa", "Ama", "Araba",
]

FIRST_STUDENT_ID = 10000000
FIRST_INDEX_NO = 2000000


def pick_middle_name(first_name: str, seed: int, pool: List[str]) -> Optional[str]:
    """First name in the pool, starting at seed, that differs from first_name"""
    for i in range(len(pool)):
        candidate = pool[(seed + i) % len(pool)]
        if candidate.lower() != first_name.lower():
            return candidate
    return None


def male_name(seed: int) -> str:
    last = LAST_NAMES[seed % len(LAST_NAMES)]
    first = MALE_FIRST_NAMES[seed % len(MALE_FIRST_NAMES)]
    middle = pick_middle_name(first, seed, MALE_MIDDLE_NAMES) if seed % 3 == 0 else None
    return f"{last}, {first}" + (f" {middle}" if middle else "")


def female_name(seed: int) -> str:
    last = LAST_NAMES[seed % len(LAST_NAMES)]
    first = FEMALE_FIRST_NAMES[seed % len(FEMALE_FIRST_NAMES)]
    middle = pick_middle_name(first, seed + 5, FEMALE_MIDDLE_NAMES) if seed % 2 == 0 else None
    return f"{last}, {first}" + (f" {middle}" if middle else "") + " (Miss)"


def generate_demo_students(count: int = DEMO_STUDENT_COUNT, seed: int = None) -> List[Student]:
    """Generate a balanced demo roster with scores between 50 and 100.

    Pass ``seed`` for a reproducible roster.
    """
    rng = random.Random(seed)

    num_females = count // 2
    num_males = count - num_females
    names = [female_name(i) for i in range(num_females)]
    # offset seeds so male names don't line up with the female ones
    names += [male_name(i + 1000) for i in range(num_males)]
    rng.shuffle(names)

    students = []
    for i in range(count):
        students.append(Student(
            student_id=str(FIRST_STUDENT_ID + i),
            index_no=str(FIRST_INDEX_NO + i),
            name=names[i % len(names)],
            cwa=round_score(50 + rng.random() * 50),
        ))
    return students
