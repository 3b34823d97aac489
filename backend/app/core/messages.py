"""Client-facing message catalogue.

The admin panel is zh-TW only; these strings are part of the wire contract.
"""

INVALID_FIELDS = "欄位未填寫正確"
INVALID_ID = "ID錯誤"
DUPLICATE = "資料重複"
ROUTE_NOT_FOUND = "無此網站路由"
SERVER_ERROR = "伺服器錯誤"

USER_NOT_FOUND = "使用者不存在"
USER_NOT_COACH = "使用者尚未成為教練"
USER_ALREADY_COACH = "使用者已經是教練"
USER_UPDATE_FAILED = "更新使用者失敗"
COURSE_NOT_FOUND = "課程不存在"
COURSE_UPDATE_FAILED = "更新課程失敗"

# Log-only
INVALID_PROFILE_IMAGE_URL = "大頭貼網址錯誤"
