"""Configuration module for the itinerary prettifier."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""
    
    # Logging level
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
    
    # Software Version
    VERSION = os.getenv('VERSION', 'v0.0.0')
    
    # Preselected colour (menu number 1-5); empty means ask interactively
    PRETTIFIER_COLOR = os.getenv('PRETTIFIER_COLOR', '').strip()
    
    # Airport lookup layout
    LOOKUP_WIDTH = 6
    LOOKUP_COLUMNS = ['icao_code', 'iata_code', 'name', 'municipality']
    
    @classmethod
    def validate(cls):
        """Validate configuration."""
        if cls.PRETTIFIER_COLOR and cls.PRETTIFIER_COLOR not in ('1', '2', '3', '4', '5'):
            raise ValueError(
                f"PRETTIFIER_COLOR must be a number from 1 to 5, got '{cls.PRETTIFIER_COLOR}'"
            )
        return True
