SAMPLE_LESSON: dict[str, str] = {
    "schoolName": "Springfield Elementary School",
    "teacherName": "John Smith",
    "term": "Fall 2024",
    "date": "2024-01-15",
    "subject": "Mathematics",
    "className": "Grade 5A",
    "unitNo": "3",
    "lessonNo": "2",
    "duration": "45 minutes",
    "classSize": "25 students",
    "specialNeeds": "2 students with learning disabilities",
    "unitTitle": "Fractions and Decimals",
    "keyCompetence": "Problem-solving and critical thinking",
    "lessonTitle": "Understanding Equivalent Fractions",
    "instructionalObjective": "Students will be able to identify and create equivalent fractions",
    "location": "Classroom 101",
    "materials": "Fraction bars, worksheets, whiteboard",
    "references": "Math textbook pages 45-50",
}
