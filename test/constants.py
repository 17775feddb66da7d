# Test Utility Constants

WEBINAR_BASE = '/webinars'
HEALTH_URL = '/health'

# Acting users
ALICE_ID = 'alice'
BOB_ID = 'bob'
USER_HEADER = 'X-User-Id'

# Webinar seeds
WEBINAR_ID = 'webinar-1'
WEBINAR_TITLE = 'Introduction to Clean Architecture'
WEBINAR_SEATS = 50

SEATS_UPDATED_MESSAGE = 'Seats updated'
