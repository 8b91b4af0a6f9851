ROUTES_PATH = {
    "Login": "/",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}

EMPLOYEE = "Employee"

MONTHS_FR = {
    1: "Jan",
    2: "Fév",
    3: "Mar",
    4: "Avr",
    5: "Mai",
    6: "Jui",
    7: "Jui",
    8: "Aoû",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Déc",
}

STATUS_LABELS = {
    "pending": "En attente",
    "accepted": "Accepté",
    "refused": "Refused",
}

EXPENSE_TYPES = [
    "Transports",
    "Restaurants et bars",
    "Hôtel et logement",
    "Services en ligne",
    "IT et électronique",
    "Equipement et matériel",
    "Fournitures de bureau",
]

ALLOWED_RECEIPT_TYPES = {"image/jpeg", "image/jpg", "image/png"}
ALLOWED_RECEIPT_EXTENSIONS = {".jpeg", ".jpg", ".png"}

RECEIPT_TYPE_ALERT = "Le justificatif doit être au format png ou jpeg."

DEFAULT_VAT_PCT = 20
