"""Static course catalog shown on the courses page and offered on the application form."""

COURSES = [
    {
        'id': 1,
        'name': 'Computer Science & Engineering',
        'duration': '4 Years',
        'fees': '$12,000/year',
        'description': 'Comprehensive program covering software development, algorithms, and system design.',
        'category': 'Engineering',
    },
    {
        'id': 2,
        'name': 'Business Administration',
        'duration': '3 Years',
        'fees': '$10,000/year',
        'description': 'Learn management, finance, marketing, and entrepreneurship skills.',
        'category': 'Business',
    },
    {
        'id': 3,
        'name': 'Data Science',
        'duration': '2 Years',
        'fees': '$15,000/year',
        'description': 'Master data analysis, machine learning, and statistical modeling.',
        'category': 'Technology',
    },
    {
        'id': 4,
        'name': 'Mechanical Engineering',
        'duration': '4 Years',
        'fees': '$11,000/year',
        'description': 'Design, analysis, and manufacturing of mechanical systems.',
        'category': 'Engineering',
    },
    {
        'id': 5,
        'name': 'Digital Marketing',
        'duration': '1 Year',
        'fees': '$8,000/year',
        'description': 'Modern marketing strategies for the digital age.',
        'category': 'Business',
    },
    {
        'id': 6,
        'name': 'Artificial Intelligence',
        'duration': '2 Years',
        'fees': '$16,000/year',
        'description': 'Advanced AI concepts, neural networks, and machine learning.',
        'category': 'Technology',
    },
]

COURSE_NAMES = [c['name'] for c in COURSES]
CATEGORIES = ['All', 'Engineering', 'Business', 'Technology']
ALL_COURSES = 'All'
