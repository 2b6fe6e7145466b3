from models.courses import ALL_COURSES, COURSES


def filter_courses(search_term='', category=ALL_COURSES, courses=COURSES):
    term = (search_term or '').lower()
    filtered = list(courses)
    if term:
        filtered = [c for c in filtered if term in c['name'].lower() or term in c['description'].lower()]
    if category and category != ALL_COURSES:
        filtered = [c for c in filtered if c['category'] == category]
    return filtered
