import os

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Derive a structured datetime from requestContext.timeEpoch
STRUCTURED_TIME = os.environ.get('STRUCTURED_TIME', 'true').lower() not in ['0', 'false', 'no', 'off']
