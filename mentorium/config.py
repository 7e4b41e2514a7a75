# mentorium/config.py
"""Configuration settings for mentorium"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# File paths
DATA_DIR = os.getenv('MENTORIUM_DATA_DIR', './data')
OUTPUT_FILE = os.path.join(DATA_DIR, 'allocation_results.json')
WORKBOOK_FILE = os.path.join(DATA_DIR, 'mentor_allocation.xlsx')
REPORT_FILE = os.path.join(DATA_DIR, 'mentor_allocation.pdf')
TEMPLATE_FILE = 'mentorium-template.xlsx'

# Allocation settings
DEFAULT_NUM_MENTORS = int(os.getenv('MENTORIUM_NUM_MENTORS', '6'))

# Demo roster
DEMO_STUDENT_COUNT = int(os.getenv('MENTORIUM_DEMO_STUDENTS', '36'))

# Spreadsheet columns (exact, case-sensitive)
REQUIRED_COLUMNS = ('STUDENTID', 'INDEXNO', 'NAME', 'CWA')
TEMPLATE_SHEET = 'Students'

# Score bounds
CWA_MIN = 0
CWA_MAX = 100
CWA_DECIMALS = 2

# Report
REPORT_TITLE = 'Mentor Allocation Report'
REPORT_SUBTITLE = 'Bidirectional Score-Based Round Robin'
