SUBMIT_RSVP_URL = "/rsvp"
LIST_RSVPS_URL = "/rsvps"
EXPORT_JSON_URL = "/export.json"
EXPORT_CSV_URL = "/export.csv"
ADMIN_URL = "/admin"
