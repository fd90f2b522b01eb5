"""MediCare+ clinic booking portal."""
