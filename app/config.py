import os

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

POSTGRES_PORT = os.getenv('POSTGRES_PORT', default='5432')
POSTGRES_USER = os.getenv('POSTGRES_USER')

Environment = os.getenv('CODEPREP_ENV', default='development')
Config = {
  'development': dotdict({
    'connectionString'  : os.getenv('DATABASE_URL', default='sqlite:///./codeprep.db'),
    'pageSize'          : int(os.getenv('PAGE_SIZE', default=12)),
    'adminPageSize'     : 20,
    'searchLimit'       : 20,
    'sqlEcho'           : os.getenv('SQL_ECHO', default='false').lower() == 'true',
    'corsOrigins'       : ['*'],
    'debug'             : True,
  }),
  'production': dotdict({
    'connectionString'  : os.getenv('DATABASE_URL', default=f"postgresql://{POSTGRES_USER}:{os.getenv('POSTGRES_PASSWORD')}@{os.getenv('POSTGRES_HOST')}:{POSTGRES_PORT}/{os.getenv('POSTGRES_DBNM')}"),
    'pageSize'          : int(os.getenv('PAGE_SIZE', default=12)),
    'adminPageSize'     : 20,
    'searchLimit'       : 20,
    'sqlEcho'           : False,
    'corsOrigins'       : os.getenv('CORS_ORIGINS', default='*').split(','),
    'debug'             : False,
  })
}
