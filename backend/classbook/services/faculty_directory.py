from __future__ import annotations

FACULTY: tuple[dict, ...] = (
    {
        "id": "1",
        "name": "Dr. Lisa Verma",
        "department": "CSE",
        "email": "lv@bwu.ac.in",
        "phone": "9876543210",
        "courses": ["AI", "ML"],
        "feedback": [{"rating": 5, "comment": "Great teacher"}, {"rating": 4, "comment": "Good explanations"}],
        "classes_handled": 42,
    },
    {
        "id": "2",
        "name": "Prof. Karthik Iyer",
        "department": "CSE",
        "email": "ki@bwu.ac.in",
        "phone": "9123456789",
        "courses": ["Operating Systems"],
        "feedback": [{"rating": 3, "comment": "Too fast in lectures"}, {"rating": 4, "comment": "Helpful in doubts"}],
        "classes_handled": 30,
    },
    {
        "id": "3",
        "name": "Dr. Priyanka Saha",
        "department": "CSE",
        "email": "ps@bwu.ac.in",
        "phone": "9811122233",
        "courses": ["Artificial Intelligence"],
        "feedback": [{"rating": 5, "comment": "Very engaging"}, {"rating": 5, "comment": "Excellent content"}],
        "classes_handled": 55,
    },
    {
        "id": "4",
        "name": "Dr. Anirban Sen",
        "department": "CSE-AI",
        "email": "as@bwu.ac.in",
        "phone": "9898989898",
        "courses": ["Deep Learning", "Neural Networks"],
        "feedback": [{"rating": 5, "comment": "Inspiring sessions"}, {"rating": 4, "comment": "Hands-on approach"}],
        "classes_handled": 28,
    },
    {
        "id": "5",
        "name": "Ms. Debasmita Saha",
        "department": "CSE-AI",
        "email": "ds@bwu.ac.in",
        "phone": "9000012345",
        "courses": ["Computer Vision"],
        "feedback": [{"rating": 4, "comment": "Clear explanations"}, {"rating": 4, "comment": "Supportive"}],
        "classes_handled": 24,
    },
    {
        "id": "6",
        "name": "Dr. Amit Roy",
        "department": "CSE-AI",
        "email": "ar@bwu.ac.in",
        "phone": "9111122233",
        "courses": ["Machine Learning"],
        "feedback": [{"rating": 5, "comment": "Excellent content"}, {"rating": 4, "comment": "Engaging"}],
        "classes_handled": 40,
    },
    {
        "id": "7",
        "name": "Dr. Sonali Mondal",
        "department": "CS-DS",
        "email": "sm@bwu.ac.in",
        "phone": "9333344444",
        "courses": ["Data Mining", "Big Data Analytics"],
        "feedback": [{"rating": 5, "comment": "Great insights"}, {"rating": 4, "comment": "Good practicals"}],
        "classes_handled": 38,
    },
    {
        "id": "8",
        "name": "Mr. Rajat Gupta",
        "department": "CS-DS",
        "email": "rg@bwu.ac.in",
        "phone": "9555566666",
        "courses": ["DBMS Lab", "Operating Systems Lab"],
        "feedback": [{"rating": 4, "comment": "Very helpful"}, {"rating": 4, "comment": "Good lab sessions"}],
        "classes_handled": 26,
    },
    {
        "id": "9",
        "name": "Prof. Manas Saha",
        "department": "CS-DS",
        "email": "ms@bwu.ac.in",
        "phone": "9777788888",
        "courses": ["Probability & Statistics"],
        "feedback": [{"rating": 4, "comment": "Concept driven"}, {"rating": 4, "comment": "Well structured"}],
        "classes_handled": 31,
    },
)


def average_rating(feedback: list[dict]) -> float:
    if not feedback:
        return 0.0
    return round(sum(item.get("rating", 0) for item in feedback) / len(feedback), 2)


def filter_faculty(search: str = "", department: str = "") -> list[dict]:
    needle = (search or "").strip().lower()
    dept = (department or "").strip().lower()
    matches = []
    for member in FACULTY:
        if needle and needle not in member["name"].lower() and needle not in member["email"].lower():
            continue
        if dept and member["department"].lower() != dept:
            continue
        matches.append({**member, "average_rating": average_rating(member["feedback"])})
    return matches
