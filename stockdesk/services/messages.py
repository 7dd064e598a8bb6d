"""User-facing response messages per resource and display locale."""

from __future__ import annotations

from typing import Dict

MESSAGES: Dict[str, Dict[str, Dict[str, str]]] = {
    "he": {
        "checklists": {
            "created": "הצ'ק ליסט נשמר בהצלחה",
            "create_failed": "שגיאה בשמירת הצ'ק ליסט",
            "updated": "הצ'ק ליסט עודכן בהצלחה",
            "update_failed": "שגיאה בעדכון הצ'ק ליסט",
            "deleted": "הצ'ק ליסט נמחק בהצלחה",
            "delete_failed": "שגיאה במחיקת הצ'ק ליסט",
            "not_found": "צ'ק ליסט לא נמצא",
        },
        "alerts": {
            "created": "ההתראה נוצרה בהצלחה",
            "create_failed": "שגיאה ביצירת ההתראה",
            "updated": "ההתראה עודכנה בהצלחה",
            "update_failed": "שגיאה בעדכון ההתראה",
            "deleted": "ההתראה נמחקה בהצלחה",
            "delete_failed": "שגיאה במחיקת ההתראה",
            "not_found": "התראה לא נמצאה",
        },
        "blog": {
            "created": "הפוסט פורסם בהצלחה",
            "create_failed": "שגיאה בפרסום הפוסט",
            "updated": "הפוסט עודכן בהצלחה",
            "update_failed": "שגיאה בעדכון הפוסט",
            "deleted": "הפוסט נמחק בהצלחה",
            "delete_failed": "שגיאה במחיקת הפוסט",
            "not_found": "פוסט לא נמצא",
        },
    },
    "en": {
        "checklists": {
            "created": "Checklist saved successfully",
            "create_failed": "Error saving checklist",
            "updated": "Checklist updated successfully",
            "update_failed": "Error updating checklist",
            "deleted": "Checklist deleted successfully",
            "delete_failed": "Error deleting checklist",
            "not_found": "Checklist not found",
        },
        "alerts": {
            "created": "Alert created successfully",
            "create_failed": "Error creating alert",
            "updated": "Alert updated successfully",
            "update_failed": "Error updating alert",
            "deleted": "Alert deleted successfully",
            "delete_failed": "Error deleting alert",
            "not_found": "Alert not found",
        },
        "blog": {
            "created": "Post published successfully",
            "create_failed": "Error publishing post",
            "updated": "Post updated successfully",
            "update_failed": "Error updating post",
            "deleted": "Post deleted successfully",
            "delete_failed": "Error deleting post",
            "not_found": "Post not found",
        },
    },
}


def message(locale: str, resource: str, key: str) -> str:
    """Look up a message, falling back to English for unknown locales."""
    catalogue = MESSAGES.get(locale) or MESSAGES["en"]
    return catalogue[resource][key]
