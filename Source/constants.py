from decimal import Decimal

DECIMAL_QUANTIZE = Decimal("0.01")

# Status keyed templates, pool framing
PAYMENT_MESSAGES = {
        'owes': "Mail reminder to {member}: You still need to pay {amount} for your share",
        'receives': "Mail reminder to {member}: You will receive {amount} back (you overpaid)",
        'settled': "Mail reminder to {member}: You are settled up, no payment needed - thank you!",
    }

# Status keyed templates, admin fronted the bill
ADMIN_PAYMENT_MESSAGES = {
        'owes': "Mail to {member}: You need to pay {amount} to {admin}",
        'receives': "Mail to {member}: {admin} owes you {amount} back",
        'settled': "Mail to {member}: You are settled up with {admin}, no payment needed",
    }

ADMIN_SELF_MESSAGE = "{admin}: You paid the full bill and will receive payments from others"

EMAIL_SUBJECT = "Payment Reminder: {expense}"

EMAIL_BODY = (
    "Hi {member},\n\n"
    "This is a friendly reminder that you have an outstanding payment for the "
    "expense \"{expense}\" in the group {group}.\n\n"
    "Amount Due: {amount}\n\n"
    "{message}\n\n"
    "Please mark your payment as completed once you've settled this expense.\n"
    "Thank you!\n"
    "The {app} Team"
)

WHATSAPP_MESSAGE = (
    "🔔 *Payment Reminder*\n\n"
    "Hi {member},\n\n"
    "You have an outstanding payment:\n\n"
    "💰 *Amount:* {amount}\n"
    "📋 *Expense:* {expense}\n"
    "👥 *Group:* {group}\n\n"
    "Please mark your payment as completed once settled.\n\n"
    "Thank you! 🙏"
)

# Reminder channels
CHANNEL_EMAIL = 'email'
CHANNEL_WHATSAPP = 'whatsapp'
CHANNEL_BOTH = 'both'
REMINDER_CHANNELS = [CHANNEL_EMAIL, CHANNEL_WHATSAPP, CHANNEL_BOTH]

PAYMENT_METHODS = ['cash', 'upi', 'card', 'bank_transfer', 'other']

# CSV columns
MEMBER_COLUMNS = ['id', 'name']
MEMBER_OPTIONAL_COLUMNS = ['email', 'phone']
PAYMENT_COLUMNS = ['participant_id', 'amount']
PAYMENT_OPTIONAL_COLUMNS = ['method', 'notes']
