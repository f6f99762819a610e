import sys
import os
from pathlib import Path

# Add the Lambda asset directory to Python path
functions_root = Path(__file__).parent.parent / "assets" / "functions"
sys.path.insert(0, str(functions_root))

# Set environment variables for testing
os.environ.setdefault('AWS_DEFAULT_REGION', 'eu-west-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')
os.environ.setdefault('POWERTOOLS_TRACE_DISABLED', '1')
os.environ.setdefault('POWERTOOLS_SERVICE_NAME', 'image-thumbnails')
os.environ.setdefault('POWERTOOLS_METRICS_NAMESPACE', 'ImageThumbnailsTest')
