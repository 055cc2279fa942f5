# User-facing messages. The front-end and admin page show these verbatim.

FILL_ALL_FIELDS = "Пожалуйста, заполните все поля"
INVALID_PHONE = "Пожалуйста, введите корректный номер телефона"
APPOINTMENT_ACCEPTED = "Спасибо! Ваша заявка принята. Мы свяжемся с вами в ближайшее время."
APPOINTMENT_FAILED = "Произошла ошибка при обработке заявки. Пожалуйста, попробуйте позже."

INVALID_STATUS = "Статус должен быть: приём или отмена"
APPOINTMENT_NOT_FOUND = "Заявка не найдена"
APPOINTMENT_DELETED = "Заявка удалена"

SERVER_ERROR = "Ошибка сервера"
UNHANDLED_ERROR = "Произошла ошибка сервера. Пожалуйста, попробуйте позже."
API_NOT_FOUND = "API endpoint not found"
