"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Helpers numéricos reusables en CUALQUIER dominio:
     - is_integral, is_finite_number, round_half_away_from_zero
   • Tipos primitivos validados
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Entidades específicas del dominio (Image, ProcessingJob)
   • Reglas de negocio (límites de formato, tamaño o factor de escalado)

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/
"""
