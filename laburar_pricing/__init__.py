"""LaburAR pricing service: Argentine fee breakdowns and installment plans"""

__version__ = "0.1.0"
