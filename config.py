import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'supersecretkey')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///admissions.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    INSTITUTION_NAME = os.getenv('INSTITUTION_NAME', 'Excellence University')
    # Storage keys for the persisted JSON collections
    APPLICATIONS_KEY = 'studentApplications'
    CONTACT_MESSAGES_KEY = 'contactMessages'
    CSV_EXPORT_FILENAME = 'student_applications.csv'
