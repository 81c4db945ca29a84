from os import environ as env

BUNGEE_QUOTE_URL = 'https://public-backend.bungee.exchange/api/v1/bungee/quote'
BUNGEE_API_KEY = env.get('BUNGEE_API_KEY')
