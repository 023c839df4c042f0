# models_bootstrap.py
from employee import models as _employee_models
from project import models as _project_models
from task import models as _task_models
from assignment import models as _assignment_models
