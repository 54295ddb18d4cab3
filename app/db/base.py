# Importa a Base declarativa
from app.db.base_class import Base

# --- IMPORTAÇÃO DE TODOS OS MODELOS ---
# Todos os modelos precisam ser importados aqui para que o SQLAlchemy
# consiga resolver os relacionamentos (ForeignKeys) antes do create_all.

from app.db.models.user import User
from app.db.models.career import CareerProfile, EmploymentRecord
from app.db.models.job import Job
from app.db.models.career_simulation import CareerSimulation
