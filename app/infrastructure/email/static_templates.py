"""
Built-in notification templates.
Used whenever no active template is stored for a notification kind.
"""

STATIC_TEMPLATES = {
    # Appointment booking
    "appointment.subject": "New Appointment Booking - {{ name }}",
    "appointment.html": """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h2>New Appointment Booking</h2>
  <p><strong>Name:</strong> {{ name }}</p>
  <p><strong>Email:</strong> {{ email }}</p>
  <p><strong>Phone:</strong> {{ phone }}</p>
  <p><strong>Date:</strong> {{ preferred_date }}</p>
  <p><strong>Time:</strong> {{ preferred_time }}</p>
  {% if property_interest %}<p><strong>Interest:</strong> {{ property_interest }}</p>{% endif %}
  {% if message %}<p><strong>Message:</strong> {{ message }}</p>{% endif %}
</div>
""",
    "appointment.txt": (
        "New Appointment Booking - {{ name }}\n"
        "Email: {{ email }}\n"
        "Phone: {{ phone }}\n"
        "Date: {{ preferred_date }}\n"
        "Time: {{ preferred_time }}"
        "{% if property_interest %}\nInterest: {{ property_interest }}{% endif %}"
        "{% if message %}\n\n{{ message }}{% endif %}"
    ),

    # Custom build request
    "build.subject": "New Build Request - {{ name }} (Budget: {{ currency_code }} {{ budget | currency }})",
    "build.html": """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h2>New Build Request</h2>
  <p><strong>Name:</strong> {{ name }}</p>
  <p><strong>Email:</strong> {{ email }}</p>
  <p><strong>Phone:</strong> {{ phone }}</p>
  <p><strong>Budget:</strong> {{ currency_code }} {{ budget | currency }}</p>
  <p><strong>Location:</strong> {{ location }}</p>
  <p><strong>Property Type:</strong> {{ property_type }}</p>
  <p><strong>Bedrooms:</strong> {{ bedrooms }}</p>
  <p><strong>Bathrooms:</strong> {{ bathrooms }}</p>
  <p><strong>Timeline:</strong> {{ timeline }}</p>
  {% if special_requirements %}<p><strong>Special Requirements:</strong> {{ special_requirements }}</p>{% endif %}
</div>
""",
    "build.txt": (
        "New Build Request - {{ name }}\n"
        "Email: {{ email }}\n"
        "Phone: {{ phone }}\n"
        "Budget: {{ currency_code }} {{ budget | currency }}\n"
        "Location: {{ location }}\n"
        "Property Type: {{ property_type }}\n"
        "Bedrooms: {{ bedrooms }}\n"
        "Bathrooms: {{ bathrooms }}\n"
        "Timeline: {{ timeline }}"
        "{% if special_requirements %}\nSpecial Requirements: {{ special_requirements }}{% endif %}"
    ),

    # Contact message
    "contact.subject": "New Contact Message - {{ subject }}",
    "contact.html": """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h2>New Contact Message</h2>
  <p><strong>Name:</strong> {{ name }}</p>
  <p><strong>Email:</strong> {{ email }}</p>
  <p><strong>Phone:</strong> {{ phone }}</p>
  <p><strong>Subject:</strong> {{ subject }}</p>
  <p><strong>Message:</strong> {{ message }}</p>
</div>
""",
    "contact.txt": (
        "New Contact Message - {{ subject }}\n"
        "From: {{ name }} <{{ email }}>\n"
        "Phone: {{ phone }}\n"
        "\n"
        "{{ message }}"
    ),
}
