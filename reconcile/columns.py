# reconcile/columns.py
# Column names as they appear in the source CSV exports.

# Join key shared by every dataset
COL_COMPANY = "Company Name"

# Accounts (master list)
COL_INDUSTRY = "Industry"
COL_COMPANY_SIZE = "Company Size"
COL_REVENUE_RANGE = "Revenue Range"
COL_LIFECYCLE_STAGE = "Lifecycle Stage"
COL_APPLICATION_STATUS = "Application Status"

ACCOUNT_COLUMNS = [
    COL_COMPANY,
    COL_INDUSTRY,
    COL_COMPANY_SIZE,
    COL_REVENUE_RANGE,
    COL_LIFECYCLE_STAGE,
    COL_APPLICATION_STATUS,
]

# Calls
COL_DIALS = "Dials"
COL_CONNECTS = "Connects"
COL_CONVERSATIONS = "Conversations"
COL_MEETINGS = "Meetings Set"

CALL_COUNTERS = [COL_DIALS, COL_CONNECTS, COL_CONVERSATIONS, COL_MEETINGS]

# Emails (source name -> reconciled name)
EMAIL_FIELDS = {
    "Emails Sent": "Emails Sent",
    "Opens": "Email Opens",
    "Clicks": "Email Clicks",
}

# Web visits
COL_LAST_VISIT_SRC = "Date of Last Visit"
COL_PAGES_VISITED = "Pages Visited"
COL_LAST_VISIT = "Last Website Visit"

# Derived
COL_CONNECT_RATE = "Connect Rate"
COL_MEETING_RATE = "Meeting Rate"

# Fixed header of the reconciled export
RECONCILED_COLUMNS = [
    COL_COMPANY,
    COL_INDUSTRY,
    COL_COMPANY_SIZE,
    COL_REVENUE_RANGE,
    COL_LIFECYCLE_STAGE,
    COL_APPLICATION_STATUS,
    COL_DIALS,
    COL_CONNECTS,
    COL_CONNECT_RATE,
    COL_CONVERSATIONS,
    COL_MEETINGS,
    COL_MEETING_RATE,
    "Emails Sent",
    "Email Opens",
    "Email Clicks",
    COL_LAST_VISIT,
    COL_PAGES_VISITED,
]

# Lifecycle stages that count as an application
APPLICATION_STAGES = {"SQL", "Opportunity"}
STATUS_APPROVED = "Approved"
STATUS_REJECTED = "Rejected"
