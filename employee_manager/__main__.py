"""
python -m employee_manager

Terminal employee record manager. Records live in ./employees (EMPLOYEE_DIR),
one <id>.txt file each. First run creates the directory with one login:
    username: testing
    password: password
"""
import sys

from employee_manager.main import main

if __name__ == "__main__":
    sys.exit(main())
