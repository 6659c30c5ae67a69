"""
Environment configuration utility for the formfields project.
Import this module anywhere in the project to access environment variables.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Django Configuration
SECRET_KEY = os.getenv('SECRET_KEY')
DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Form rendering
FORMFIELDS_DEFAULT_FORM_CONTROL = os.getenv('FORMFIELDS_DEFAULT_FORM_CONTROL', '')

def get_env_variable(var_name, default=None):
    """
    Get an environment variable with optional default value.
    
    Args:
        var_name (str): Name of the environment variable
        default: Default value if variable is not found
    
    Returns:
        str: Environment variable value or default
    """
    return os.getenv(var_name, default)
