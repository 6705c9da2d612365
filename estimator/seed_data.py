"""Default pricing catalog loaded by `flask seed-data`. Prices are in USD (the base currency)."""

INDUSTRIES = [
    {'name': name} for name in (
        'Healthcare', 'Fintech', 'Edtech', 'Logistics', 'Retail',
        'Real Estate', 'Travel', 'Food & Beverage', 'Manufacturing', 'Other',
    )
]

SOFTWARE_TYPES = [
    {'name': 'Web App', 'category': 'web', 'basePrice': 15000, 'complexity': 'simple'},
    {'name': 'Mobile App', 'category': 'mobile', 'basePrice': 25000, 'complexity': 'medium'},
    {'name': 'SaaS Platform', 'category': 'web', 'basePrice': 50000, 'complexity': 'complex'},
    {'name': 'ERP System', 'category': 'other', 'basePrice': 80000, 'complexity': 'complex'},
    {'name': 'Marketplace', 'category': 'web', 'basePrice': 60000, 'complexity': 'complex'},
    {'name': 'CRM System', 'category': 'web', 'basePrice': 35000, 'complexity': 'medium'},
]

TECH_STACKS = (
    [{'name': name, 'category': 'backend'} for name in ('Node.js', '.NET', 'PHP', 'Python', 'Java', 'Ruby')]
    + [{'name': name, 'category': 'frontend'} for name in ('React', 'Angular', 'Vue.js', 'Next.js', 'Svelte')]
    + [{'name': name, 'category': 'mobile'} for name in ('React Native', 'Flutter', 'Swift', 'Kotlin', 'Xamarin')]
)

TIMELINES = [
    {'label': '1-2 months', 'durationInMonths': 2, 'multiplier': 1.5, 'description': 'Express (+50%)'},
    {'label': '3-6 months', 'durationInMonths': 6, 'multiplier': 1.0, 'description': 'Standard'},
    {'label': '6-12 months', 'durationInMonths': 12, 'multiplier': 0.8, 'description': 'Save 20%'},
    {'label': '12+ months', 'durationInMonths': 18, 'multiplier': 0.7, 'description': 'Save 30%'},
]

FEATURES = [
    {'name': 'User Login/Registration', 'category': 'authentication', 'basePrice': 2000, 'estimatedHours': 40, 'complexity': 'simple'},
    {'name': 'Payment Gateway', 'category': 'commerce', 'basePrice': 5000, 'estimatedHours': 80, 'complexity': 'medium'},
    {'name': 'Push Notifications', 'category': 'engagement', 'basePrice': 3000, 'estimatedHours': 50, 'complexity': 'medium'},
    {'name': 'Admin Panel', 'category': 'management', 'basePrice': 8000, 'estimatedHours': 120, 'complexity': 'medium'},
    {'name': 'Analytics Dashboard', 'category': 'management', 'basePrice': 6000, 'estimatedHours': 100, 'complexity': 'medium'},
    {'name': 'Multilingual Support', 'category': 'engagement', 'basePrice': 4000, 'estimatedHours': 60, 'complexity': 'medium'},
    {'name': 'AI Integration', 'category': 'integrations', 'basePrice': 12000, 'estimatedHours': 200, 'complexity': 'complex'},
    {'name': 'API Integrations', 'category': 'integrations', 'basePrice': 5000, 'estimatedHours': 80, 'complexity': 'medium'},
    {'name': 'Chat Support', 'category': 'engagement', 'basePrice': 3500, 'estimatedHours': 60, 'complexity': 'medium'},
    {'name': 'File Upload & Storage', 'category': 'storage', 'basePrice': 2500, 'estimatedHours': 40, 'complexity': 'simple'},
]

CURRENCIES = [
    {'code': 'USD', 'name': 'US Dollar', 'symbol': '$', 'flag': '🇺🇸', 'exchangeRate': 1, 'isBaseCurrency': True},
    {'code': 'INR', 'name': 'Indian Rupee', 'symbol': '₹', 'flag': '🇮🇳', 'exchangeRate': 80},
    {'code': 'AUD', 'name': 'Australian Dollar', 'symbol': 'A$', 'flag': '🇦🇺', 'exchangeRate': 1.4667},
    {'code': 'GBP', 'name': 'British Pound', 'symbol': '£', 'flag': '🇬🇧', 'exchangeRate': 0.8},
]
