from flask import Blueprint, render_template, request
from models.courses import CATEGORIES, COURSES
from services.catalog_service import filter_courses

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    return render_template('index.html', featured=COURSES[:3])

@main_bp.route('/courses')
def courses():
    search_term = request.args.get('q', '')
    category = request.args.get('category', 'All')
    return render_template(
        'courses.html',
        courses=filter_courses(search_term, category),
        categories=CATEGORIES,
        search_term=search_term,
        selected_category=category
    )
