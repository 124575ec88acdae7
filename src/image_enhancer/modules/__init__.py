"""📦 modules/ — Bounded contexts específicos del negocio

✨ Estado actual:
   • enhancement/ → Validación de metadatos, ciclo de vida del job y
                    orquestación de la super-resolución

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Entidades, reglas y puertos del subdominio
   • application/   → Casos de uso y DTOs
   • infrastructure/→ Adaptadores concretos y observabilidad
   • entry_points/  → CLI
"""
