"""Bundled mapping presets."""
from __future__ import annotations

from .mapping import MappingConfig

# Field table of the profile directory service this dialect comes from.
CONNECTIONS_PROFILE = MappingConfig(
    card_to_attribute={
        "ADR;WORK": "workLocation",
        "AGENT;VALUE=X_PROFILE_UID": False,
        "BEGIN": False,
        "CATEGORIES": "tags",
        "EMAIL;INTERNET": "email",
        "EMAIL;X_GROUPWARE_MAIL": "groupwareEmail",
        "END": False,
        "FN": "displayName",
        "HONORIFIC_PREFIX": "courtesyTitle",
        "N": "names",
        "NICKNAME": "preferredFirstName",
        "ORG": "organizationTitle",
        "PHOTO;VALUE=URL": "photo",
        "REV": "lastUpdate",
        "ROLE": "employeeTypeDesc",
        "SOUND;VALUE=URL": "pronounciation",
        "TEL;CELL": "mobileNumber",
        "TEL;FAX": "faxNumber",
        "TEL;PAGER": "ipTelephoneNumber",
        "TEL;WORK": "telephoneNumber",
        "TEL;X_IP": "ipTelephoneNumber",
        "TITLE": "jobResp",
        "TZ": "timezone",
        "UID": False,
        "URL": "url",
        "VERSION": False,
        "X_ALTERNATE_LAST_NAME": "alternateLastname",
        "X_BLOG_URL;VALUE=URL": "blogUrl",
        "X_BUILDING": "bldgId",
        "X_COUNTRY_CODE": "countryCode",
        "X_DEPARTMENT_NUMBER": "deptNumber",
        "X_DEPARTMENT_TITLE": "deptTitle",
        "X_DESCRIPTION": "description",
        "X_EMPLOYEE_NUMBER": "employeeNumber",
        "X_EMPTYPE": "employeeTypeCode",
        "X_EXPERIENCE": "experience",
        "X_EXTENSION_PROPERTY;VALUE=X_EXTENSION_PROPERTY_ID": "extattr",
        "X_FLOOR": "floor",
        "X_IS_MANAGER": "isManager",
        "X_LCONN_USERID": "userid",
        "X_MANAGER_UID": "managerUid",
        "X_NATIVE_FIRST_NAME": "nativeFirstName",
        "X_NATIVE_LAST_NAME": "nativeLastName",
        "X_OFFICE_NUMBER": "officeName",
        "X_ORGANIZATION_CODE": "orgId",
        "X_PAGER_ID": "pagerId",
        "X_PAGER_PROVIDER": "pagerServiceProvider",
        "X_PAGER_TYPE": "pagerType",
        "X_PREFERRED_LANGUAGE": "preferredLanguage",
        "X_PREFERRED_LAST_NAME": "preferredLastName",
        "X_PROFILE_KEY": "key",
        "X_PROFILE_TYPE": "profileType",
        "X_PROFILE_UID": "uid",
        "X_SHIFT": False,
        "X_WORKLOCATION_CODE": "workLocationCode",
    },
    complex_attribute_groups={
        # country is not part of the service's address value
        "workLocation": ["skip_1", "skip_2", "address_1", "address_2", "city", "state", "postal_code"],
        "names": ["surname", "givenName"],
    },
)

PRESETS: dict[str, MappingConfig] = {
    "connections": CONNECTIONS_PROFILE,
}
